"""initial_dex_tables

Revision ID: 0001_initial_dex_tables
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001_initial_dex_tables"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "pairs",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("chain_id", sa.String(50), nullable=False),
        sa.Column("contract", sa.String(128), nullable=False),
        sa.Column("asset0", sa.String(128), nullable=False),
        sa.Column("asset1", sa.String(128), nullable=False),
        sa.Column("lp", sa.String(128), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_pairs")),
        sa.UniqueConstraint("chain_id", "contract", name="uq_pairs_chain_contract"),
    )

    op.create_table(
        "parsed_txs",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("chain_id", sa.String(50), nullable=False),
        sa.Column("height", sa.BigInteger(), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=True),
        sa.Column("hash", sa.String(100), nullable=False),
        sa.Column("sender", sa.String(128), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("contract", sa.String(128), nullable=False),
        sa.Column("asset0", sa.String(128), nullable=False),
        sa.Column("asset0_amount", sa.String(80), nullable=False),
        sa.Column("asset1", sa.String(128), nullable=False),
        sa.Column("asset1_amount", sa.String(80), nullable=False),
        sa.Column("lp", sa.String(128), nullable=False),
        sa.Column("lp_amount", sa.String(80), nullable=False),
        sa.Column("commission_amount", sa.String(80), nullable=False),
        sa.Column("tax_amount", sa.Text(), nullable=True),
        sa.Column("refund_assets", sa.Text(), nullable=True),
        sa.Column("meta", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_parsed_txs")),
    )
    op.create_index("ix_parsed_txs_chain_height", "parsed_txs", ["chain_id", "height"])
    op.create_index("ix_parsed_txs_chain_contract", "parsed_txs", ["chain_id", "contract"])
    op.create_index(op.f("ix_parsed_txs_hash"), "parsed_txs", ["hash"])

    op.create_table(
        "pool_infos",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("chain_id", sa.String(50), nullable=False),
        sa.Column("height", sa.BigInteger(), nullable=False),
        sa.Column("contract", sa.String(128), nullable=False),
        sa.Column("asset0_amount", sa.String(80), nullable=False),
        sa.Column("asset1_amount", sa.String(80), nullable=False),
        sa.Column("lp_amount", sa.String(80), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_pool_infos")),
    )
    op.create_index("ix_pool_infos_chain_height", "pool_infos", ["chain_id", "height"])

    op.create_table(
        "synced_heights",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("chain_id", sa.String(50), nullable=False),
        sa.Column("height", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_synced_heights")),
        sa.UniqueConstraint("chain_id", name=op.f("uq_synced_heights_chain_id")),
    )

    op.create_table(
        "pair_validation_exceptions",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("chain_id", sa.String(50), nullable=False),
        sa.Column("contract", sa.String(128), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_pair_validation_exceptions")),
        sa.UniqueConstraint("chain_id", "contract", name="uq_pair_validation_exceptions_chain_contract"),
    )

    op.create_table(
        "parse_error_records",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("chain_id", sa.String(50), nullable=False),
        sa.Column("height", sa.BigInteger(), nullable=False),
        sa.Column("tx_hash", sa.String(100), nullable=False),
        sa.Column("error_type", sa.String(50), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("stack_trace", sa.Text(), nullable=True),
        sa.Column("resolved", sa.Boolean(), server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_parse_error_records")),
    )
    op.create_index(op.f("ix_parse_error_records_tx_hash"), "parse_error_records", ["tx_hash"])


def downgrade() -> None:
    op.drop_index(op.f("ix_parse_error_records_tx_hash"), table_name="parse_error_records")
    op.drop_table("parse_error_records")
    op.drop_table("pair_validation_exceptions")
    op.drop_table("synced_heights")
    op.drop_index("ix_pool_infos_chain_height", table_name="pool_infos")
    op.drop_table("pool_infos")
    op.drop_index(op.f("ix_parsed_txs_hash"), table_name="parsed_txs")
    op.drop_index("ix_parsed_txs_chain_contract", table_name="parsed_txs")
    op.drop_index("ix_parsed_txs_chain_height", table_name="parsed_txs")
    op.drop_table("parsed_txs")
    op.drop_table("pairs")
