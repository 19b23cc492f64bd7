"""Declarative base shared by the tumaps ORM models (consumed by Alembic autogenerate)."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
