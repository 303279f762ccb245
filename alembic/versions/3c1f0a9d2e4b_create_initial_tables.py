"""Create initial tables

Revision ID: 3c1f0a9d2e4b
Revises:
Create Date: 2026-10-19 10:12:41.508213

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1f0a9d2e4b'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('user_id'),
    )
    op.create_index(op.f('ix_users_user_id'), 'users', ['user_id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'patient_profile',
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('patient_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('gender', sa.String(length=20), nullable=True),
        sa.Column('blood_type', sa.String(length=10), nullable=True),
        sa.Column('conditions', sa.Text(), nullable=True),
        sa.Column('allergies', sa.Text(), nullable=True),
        sa.Column('contraindications', sa.Text(), nullable=True),
        sa.Column('doctor_name', sa.String(length=255), nullable=True),
        sa.Column('doctor_contact', sa.String(length=255), nullable=True),
        sa.Column('photo_url', sa.String(length=1024), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['patient_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('profile_id'),
        sa.UniqueConstraint('patient_id'),
    )
    op.create_index(op.f('ix_patient_profile_profile_id'), 'patient_profile', ['profile_id'], unique=False)

    op.create_table(
        'caregiver_invite',
        sa.Column('invite_id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(length=16), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.Column('used', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['profile_id'], ['patient_profile.profile_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('invite_id'),
    )
    op.create_index(op.f('ix_caregiver_invite_invite_id'), 'caregiver_invite', ['invite_id'], unique=False)
    op.create_index(op.f('ix_caregiver_invite_code'), 'caregiver_invite', ['code'], unique=True)

    op.create_table(
        'permission',
        sa.Column('permission_id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('caregiver_id', sa.Integer(), nullable=False),
        sa.Column('level', sa.String(length=10), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['profile_id'], ['patient_profile.profile_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['caregiver_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('permission_id'),
        sa.UniqueConstraint('profile_id', 'caregiver_id', name='uq_permission_profile_caregiver'),
    )
    op.create_index(op.f('ix_permission_permission_id'), 'permission', ['permission_id'], unique=False)

    op.create_table(
        'medication',
        sa.Column('medication_id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('dosage', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=100), nullable=False),
        sa.Column('frequency', sa.String(length=20), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['profile_id'], ['patient_profile.profile_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('medication_id'),
    )
    op.create_index(op.f('ix_medication_medication_id'), 'medication', ['medication_id'], unique=False)
    op.create_index(op.f('ix_medication_profile_id'), 'medication', ['profile_id'], unique=False)

    op.create_table(
        'appointment',
        sa.Column('appointment_id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('caregiver_id', sa.Integer(), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('date_time', sa.DateTime(), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['profile_id'], ['patient_profile.profile_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['caregiver_id'], ['users.user_id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('appointment_id'),
    )
    op.create_index(op.f('ix_appointment_appointment_id'), 'appointment', ['appointment_id'], unique=False)
    op.create_index(op.f('ix_appointment_profile_id'), 'appointment', ['profile_id'], unique=False)

    op.create_table(
        'treatment',
        sa.Column('treatment_id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('progress', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['profile_id'], ['patient_profile.profile_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('treatment_id'),
    )
    op.create_index(op.f('ix_treatment_treatment_id'), 'treatment', ['treatment_id'], unique=False)
    op.create_index(op.f('ix_treatment_profile_id'), 'treatment', ['profile_id'], unique=False)

    op.create_table(
        'note',
        sa.Column('note_id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['profile_id'], ['patient_profile.profile_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['author_id'], ['users.user_id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('note_id'),
    )
    op.create_index(op.f('ix_note_note_id'), 'note', ['note_id'], unique=False)
    op.create_index(op.f('ix_note_profile_id'), 'note', ['profile_id'], unique=False)

    op.create_table(
        'push_subscription',
        sa.Column('subscription_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('endpoint', sa.String(length=2048), nullable=False),
        sa.Column('p256dh', sa.String(length=255), nullable=False),
        sa.Column('auth', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('subscription_id'),
        sa.UniqueConstraint('endpoint'),
    )
    op.create_index(op.f('ix_push_subscription_subscription_id'), 'push_subscription', ['subscription_id'], unique=False)


def downgrade():
    op.drop_table('push_subscription')
    op.drop_table('note')
    op.drop_table('treatment')
    op.drop_table('appointment')
    op.drop_table('medication')
    op.drop_table('permission')
    op.drop_table('caregiver_invite')
    op.drop_table('patient_profile')
    op.drop_table('users')
