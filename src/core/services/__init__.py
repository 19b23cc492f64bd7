"""
Services for tumaps.

- session.py: server-side session records in DynamoDB
- trips.py: trip reads and writes against the hosted backend
- dashboard.py: static dashboard view model
- maps.py: Google Maps widget configuration
- migration.py: Alembic migrations for the hosted trips table
"""

__all__: list[str] = []
