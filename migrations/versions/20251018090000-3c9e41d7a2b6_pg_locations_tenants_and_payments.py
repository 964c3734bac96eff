"""PG locations, tenants and tenant payments

Revision ID: 3c9e41d7a2b6
Revises:
Create Date: 2025-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel
from src.api.common.constants.rent_cycles import (
    cycle_policy_enum, payment_method_enum, payment_status_enum
)


# revision identifiers, used by Alembic.
revision: str = '3c9e41d7a2b6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

enums = [cycle_policy_enum, payment_status_enum, payment_method_enum]


def upgrade() -> None:
    """Upgrade schema."""
    bind = op.get_bind()
    for enum in enums:
        enum.create(bind, checkfirst=True)

    op.create_table('pglocation',
                    sa.Column('created_at', sa.DateTime(
                        timezone=True), nullable=False),
                    sa.Column('updated_at', sa.DateTime(
                        timezone=True), nullable=False),
                    sa.Column('id', sa.Integer(), nullable=False),
                    sa.Column('name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
                    sa.Column('address', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
                    sa.Column('rent_cycle_type', cycle_policy_enum, nullable=False),
                    sa.PrimaryKeyConstraint('id')
                    )
    op.create_index(op.f('ix_pglocation_name'),
                    'pglocation', ['name'], unique=False)
    op.create_index(op.f('ix_pglocation_rent_cycle_type'),
                    'pglocation', ['rent_cycle_type'], unique=False)

    op.create_table('tenant',
                    sa.Column('created_at', sa.DateTime(
                        timezone=True), nullable=False),
                    sa.Column('updated_at', sa.DateTime(
                        timezone=True), nullable=False),
                    sa.Column('id', sa.Integer(), nullable=False),
                    sa.Column('name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
                    sa.Column('encrypted_phone_number',
                              sqlmodel.sql.sqltypes.AutoString(), nullable=False),
                    sa.Column('pg_location_id', sa.Integer(), nullable=False),
                    sa.Column('joining_date', sa.Date(), nullable=False),
                    sa.Column('check_out_date', sa.Date(), nullable=True),
                    sa.Column('rent_amount', sa.Float(), nullable=False),
                    sa.ForeignKeyConstraint(
                        ['pg_location_id'], ['pglocation.id'],
                        name='fk_tenant_pg_location_id'
                    ),
                    sa.PrimaryKeyConstraint('id')
                    )
    op.create_index(op.f('ix_tenant_name'),
                    'tenant', ['name'], unique=False)
    op.create_index(op.f('ix_tenant_pg_location_id'),
                    'tenant', ['pg_location_id'], unique=False)
    op.create_index(op.f('ix_tenant_joining_date'),
                    'tenant', ['joining_date'], unique=False)

    op.create_table('tenantpayment',
                    sa.Column('created_at', sa.DateTime(
                        timezone=True), nullable=False),
                    sa.Column('updated_at', sa.DateTime(
                        timezone=True), nullable=False),
                    sa.Column('id', sa.Integer(), nullable=False),
                    sa.Column('tenant_id', sa.Integer(), nullable=False),
                    sa.Column('start_date', sa.Date(), nullable=False),
                    sa.Column('end_date', sa.Date(), nullable=False),
                    sa.Column('amount_paid', sa.Float(), nullable=False),
                    sa.Column('actual_rent_amount', sa.Float(), nullable=False),
                    sa.Column('payment_date', sa.Date(), nullable=False),
                    sa.Column('payment_method', payment_method_enum, nullable=False),
                    sa.Column('status', payment_status_enum, nullable=False),
                    sa.Column('remarks', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
                    sa.ForeignKeyConstraint(
                        ['tenant_id'], ['tenant.id'],
                        name='fk_tenantpayment_tenant_id'
                    ),
                    sa.PrimaryKeyConstraint('id')
                    )
    op.create_index(op.f('ix_tenantpayment_tenant_id'),
                    'tenantpayment', ['tenant_id'], unique=False)
    op.create_index(op.f('ix_tenantpayment_start_date'),
                    'tenantpayment', ['start_date'], unique=False)
    op.create_index(op.f('ix_tenantpayment_end_date'),
                    'tenantpayment', ['end_date'], unique=False)
    op.create_index(op.f('ix_tenantpayment_status'),
                    'tenantpayment', ['status'], unique=False)

    # ### end Alembic commands ###


def downgrade() -> None:
    """Downgrade schema."""
    # Payments reference tenants, which reference PG locations
    op.drop_index(op.f('ix_tenantpayment_status'), table_name='tenantpayment')
    op.drop_index(op.f('ix_tenantpayment_end_date'), table_name='tenantpayment')
    op.drop_index(op.f('ix_tenantpayment_start_date'), table_name='tenantpayment')
    op.drop_index(op.f('ix_tenantpayment_tenant_id'), table_name='tenantpayment')
    op.drop_table('tenantpayment')

    op.drop_index(op.f('ix_tenant_joining_date'), table_name='tenant')
    op.drop_index(op.f('ix_tenant_pg_location_id'), table_name='tenant')
    op.drop_index(op.f('ix_tenant_name'), table_name='tenant')
    op.drop_table('tenant')

    op.drop_index(op.f('ix_pglocation_rent_cycle_type'), table_name='pglocation')
    op.drop_index(op.f('ix_pglocation_name'), table_name='pglocation')
    op.drop_table('pglocation')

    bind = op.get_bind()
    for enum in reversed(enums):
        enum.drop(bind, checkfirst=True)

    # ### end Alembic commands ###
