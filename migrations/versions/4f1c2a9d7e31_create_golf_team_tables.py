"""create golf team tables

Revision ID: 4f1c2a9d7e31
Revises:
Create Date: 2025-10-20 09:12:04.118233

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f1c2a9d7e31'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('users',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('email', sa.String(length=120), nullable=False),
    sa.Column('password_hash', sa.String(length=255), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('users', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_users_email'), ['email'], unique=True)

    op.create_table('user_roles',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('user_id', sa.Integer(), nullable=False),
    sa.Column('role', sa.String(length=20), nullable=False),
    sa.Column('assigned_at', sa.DateTime(), nullable=True),
    sa.CheckConstraint("role IN ('Admin','Coach','Partner','Athlete')"),
    sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('user_id', 'role', name='uq_user_roles_user_role')
    )
    with op.batch_alter_table('user_roles', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_user_roles_user_id'), ['user_id'], unique=False)

    for table in ('coaches', 'partners'):
        op.create_table(table,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('phone', sa.String(length=30), nullable=True),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('version_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
        )
        with op.batch_alter_table(table, schema=None) as batch_op:
            batch_op.create_index(batch_op.f(f'ix_{table}_user_id'), ['user_id'], unique=False)

    op.create_table('athletes',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('name', sa.String(length=100), nullable=False),
    sa.Column('picture_url', sa.String(length=255), nullable=True),
    sa.Column('swing_rating', sa.Integer(), nullable=False),
    sa.Column('power_rating', sa.Integer(), nullable=False),
    sa.Column('understanding_rating', sa.Integer(), nullable=False),
    sa.Column('partner_id', sa.Integer(), nullable=False),
    sa.Column('user_id', sa.Integer(), nullable=True),
    sa.Column('version_id', sa.Integer(), nullable=False),
    sa.CheckConstraint('swing_rating BETWEEN 0 AND 5'),
    sa.CheckConstraint('power_rating BETWEEN 0 AND 5'),
    sa.CheckConstraint('understanding_rating BETWEEN 0 AND 5'),
    sa.ForeignKeyConstraint(['partner_id'], ['partners.id'], ondelete='RESTRICT'),
    sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('athletes', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_athletes_partner_id'), ['partner_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_athletes_user_id'), ['user_id'], unique=False)

    op.create_table('golf_events',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('title', sa.String(length=200), nullable=False),
    sa.Column('event_date', sa.Date(), nullable=False),
    sa.Column('start_time', sa.Time(), nullable=False),
    sa.Column('end_time', sa.Time(), nullable=False),
    sa.Column('location', sa.String(length=300), nullable=False),
    sa.Column('created_by_coach_id', sa.Integer(), nullable=False),
    sa.Column('version_id', sa.Integer(), nullable=False),
    sa.CheckConstraint('end_time > start_time', name='ck_golf_events_time_window'),
    sa.ForeignKeyConstraint(['created_by_coach_id'], ['coaches.id'], ondelete='RESTRICT'),
    sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('golf_events', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_golf_events_created_by_coach_id'), ['created_by_coach_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_golf_events_event_date'), ['event_date'], unique=False)

    op.create_table('event_scores',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('athlete_id', sa.Integer(), nullable=False),
    sa.Column('event_id', sa.Integer(), nullable=False),
    sa.Column('entered_by_partner_id', sa.Integer(), nullable=False),
    sa.Column('golf_score', sa.Integer(), nullable=False),
    sa.Column('holes_completed', sa.Integer(), nullable=False),
    sa.Column('timestamp', sa.DateTime(), nullable=False),
    sa.Column('version_id', sa.Integer(), nullable=False),
    sa.CheckConstraint('holes_completed BETWEEN 1 AND 18'),
    sa.ForeignKeyConstraint(['athlete_id'], ['athletes.id'], ondelete='CASCADE'),
    sa.ForeignKeyConstraint(['entered_by_partner_id'], ['partners.id'], ondelete='RESTRICT'),
    sa.ForeignKeyConstraint(['event_id'], ['golf_events.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('event_scores', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_event_scores_athlete_id'), ['athlete_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_event_scores_entered_by_partner_id'), ['entered_by_partner_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_event_scores_event_id'), ['event_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_event_scores_timestamp'), ['timestamp'], unique=False)


def downgrade():
    for table in ('event_scores', 'golf_events', 'athletes', 'partners', 'coaches', 'user_roles', 'users'):
        op.drop_table(table)
