"""Add roles and role settings"""
from alembic import op
import sqlalchemy as sa

revision = '4f2a9c1d7e30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    inspector = sa.inspect(op.get_bind())
    tables = inspector.get_table_names()
    if 'roles' not in tables:
        op.create_table('roles',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(length=63), nullable=False),
            sa.Column('password_hash', sa.String(length=255), nullable=True),
            sa.Column('login', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.Column('updated_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        with op.batch_alter_table('roles', schema=None) as batch_op:
            batch_op.create_index(batch_op.f('ix_roles_name'), ['name'], unique=True)
    if 'role_settings' not in tables:
        op.create_table('role_settings',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('role_id', sa.Integer(), nullable=False),
            sa.Column('option', sa.String(length=63), nullable=False),
            sa.Column('value', sa.String(length=63), nullable=False),
            sa.ForeignKeyConstraint(['role_id'], ['roles.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('role_id', 'option', name='uq_role_settings_role_option')
        )
        with op.batch_alter_table('role_settings', schema=None) as batch_op:
            batch_op.create_index(batch_op.f('ix_role_settings_role_id'), ['role_id'], unique=False)


def downgrade():
    with op.batch_alter_table('role_settings', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_role_settings_role_id'))
    op.drop_table('role_settings')
    with op.batch_alter_table('roles', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_roles_name'))
    op.drop_table('roles')
