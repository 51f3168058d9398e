"""Create trainer calendar tables

Revision ID: 4b1e7c9a2d10
Revises: 
Create Date: 2026-10-12 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e7c9a2d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'trainers',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('custom_trainer_id', sa.String(), nullable=True),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('blocked_weekdays', sa.JSON(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('custom_trainer_id')
    )

    op.create_table(
        'booking_requests',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('course_id', sa.UUID(), nullable=False),
        sa.Column('trainer_id', sa.UUID(), nullable=False),
        sa.Column('client_name', sa.String(), nullable=True),
        sa.Column('client_email', sa.String(), nullable=True),
        sa.Column('course_title', sa.String(), nullable=True),
        sa.Column('requested_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=True),
        sa.Column('status', sa.String(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['trainer_id'], ['trainers.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_booking_requests_trainer_date', 'booking_requests', ['trainer_id', 'requested_date'])
    op.create_index('idx_booking_requests_course_id', 'booking_requests', ['course_id'])

    op.create_table(
        'events',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('course_id', sa.UUID(), nullable=False),
        sa.Column('trainer_id', sa.UUID(), nullable=False),
        sa.Column('booking_request_id', sa.UUID(), nullable=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('venue', sa.String(), nullable=True),
        sa.Column('event_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=True),
        sa.Column('status', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['trainer_id'], ['trainers.id'], ),
        sa.ForeignKeyConstraint(['booking_request_id'], ['booking_requests.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_events_trainer_status_date', 'events', ['trainer_id', 'status', 'event_date'])
    op.create_index('idx_events_course_id', 'events', ['course_id'])

    op.create_table(
        'trainer_availability',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('trainer_id', sa.UUID(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('start_time', sa.String(), nullable=True),
        sa.Column('end_time', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['trainer_id'], ['trainers.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('trainer_id', 'date', name='uq_trainer_availability_trainer_date')
    )

    op.create_table(
        'trainer_blocked_dates',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('trainer_id', sa.UUID(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('reason', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['trainer_id'], ['trainers.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('trainer_id', 'date', name='uq_trainer_blocked_dates_trainer_date')
    )


def downgrade() -> None:
    op.drop_table('trainer_blocked_dates')
    op.drop_table('trainer_availability')

    op.drop_index('idx_events_course_id', table_name='events')
    op.drop_index('idx_events_trainer_status_date', table_name='events')
    op.drop_table('events')

    op.drop_index('idx_booking_requests_course_id', table_name='booking_requests')
    op.drop_index('idx_booking_requests_trainer_date', table_name='booking_requests')
    op.drop_table('booking_requests')

    op.drop_table('trainers')
