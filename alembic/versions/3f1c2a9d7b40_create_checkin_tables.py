"""create events, attendees, booths and scan_records tables

Revision ID: 3f1c2a9d7b40
Revises: 
Create Date: 2026-10-17 10:12:31.402113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

event_status_enum = sa.Enum('upcoming', 'active', 'ended', name='event_status_enum')


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'events',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('event_name', sa.String(length=200), nullable=False),
        sa.Column('event_code', sa.String(length=50), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('location', sa.String(length=300), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', event_status_enum, nullable=False, server_default='upcoming'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('event_code'),
    )

    op.create_table(
        'attendees',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('event_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('company', sa.String(length=200), nullable=True),
        sa.Column('title', sa.String(length=100), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('qr_code_token', sa.String(length=255), nullable=False),
        sa.Column('badge_number', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('qr_code_token'),
        sa.UniqueConstraint('event_id', 'email', name='uq_attendee_event_email'),
    )
    op.create_index('ix_attendees_event_id', 'attendees', ['event_id'])

    op.create_table(
        'booths',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('event_id', sa.Uuid(), nullable=False),
        sa.Column('booth_number', sa.String(length=50), nullable=False),
        sa.Column('booth_name', sa.String(length=200), nullable=False),
        sa.Column('company', sa.String(length=200), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('qr_code_token', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('qr_code_token'),
        sa.UniqueConstraint('event_id', 'booth_number', name='uq_booth_event_number'),
    )
    op.create_index('ix_booths_event_id', 'booths', ['event_id'])

    op.create_table(
        'scan_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('attendee_id', sa.Uuid(), nullable=False),
        sa.Column('booth_id', sa.Uuid(), nullable=False),
        sa.Column('event_id', sa.Uuid(), nullable=False),
        sa.Column('scanned_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['attendee_id'], ['attendees.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['booth_id'], ['booths.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['event_id'], ['events.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_scan_records_event_id', 'scan_records', ['event_id'])
    op.create_index('ix_scan_records_booth_scanned_at', 'scan_records', ['booth_id', 'scanned_at'])
    op.create_index('ix_scan_records_attendee_scanned_at', 'scan_records', ['attendee_id', 'scanned_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_scan_records_attendee_scanned_at', table_name='scan_records')
    op.drop_index('ix_scan_records_booth_scanned_at', table_name='scan_records')
    op.drop_index('ix_scan_records_event_id', table_name='scan_records')
    op.drop_table('scan_records')
    op.drop_index('ix_booths_event_id', table_name='booths')
    op.drop_table('booths')
    op.drop_index('ix_attendees_event_id', table_name='attendees')
    op.drop_table('attendees')
    op.drop_table('events')
    event_status_enum.drop(op.get_bind(), checkfirst=True)
