"""create_trips_table

Revision ID: 4b7e1c9d2a10
Revises: 
Create Date: 2026-10-17 09:12:44.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b7e1c9d2a10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        CREATE TABLE trips (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id UUID NOT NULL DEFAULT auth.uid() REFERENCES auth.users (id) ON DELETE CASCADE,
            title VARCHAR(200) NOT NULL,
            description TEXT NOT NULL DEFAULT '',
            start_date DATE NOT NULL,
            end_date DATE,
            departure VARCHAR(255) NOT NULL,
            destination VARCHAR(255) NOT NULL,
            departure_lat DOUBLE PRECISION,
            departure_lng DOUBLE PRECISION,
            destination_lat DOUBLE PRECISION,
            destination_lng DOUBLE PRECISION,
            status VARCHAR(20),
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT chk_trips_status
                CHECK (status IS NULL OR status IN ('completed', 'in_progress', 'cancelled')),
            CONSTRAINT chk_trips_dates
                CHECK (end_date IS NULL OR end_date >= start_date)
        )
    """)

    op.execute("CREATE INDEX idx_trips_user_id ON trips (user_id)")

    # Row-level security: PostgREST requests run as the signed-in user
    op.execute("ALTER TABLE trips ENABLE ROW LEVEL SECURITY")
    op.execute("""
        CREATE POLICY trips_select_own ON trips
        FOR SELECT TO authenticated
        USING (auth.uid() = user_id)
    """)
    op.execute("""
        CREATE POLICY trips_insert_own ON trips
        FOR INSERT TO authenticated
        WITH CHECK (auth.uid() = user_id)
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP POLICY IF EXISTS trips_insert_own ON trips")
    op.execute("DROP POLICY IF EXISTS trips_select_own ON trips")
    op.execute("DROP INDEX IF EXISTS idx_trips_user_id")
    op.execute("DROP TABLE IF EXISTS trips")
