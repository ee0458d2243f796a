"""initial_schema

Creates the six card-game tables.

``cards`` references ``claims`` before ``claims`` exists.  SQLite resolves
foreign-key targets when rows are written, not when a table is created, so
the original table order is kept.  Engines that check references at
``CREATE TABLE`` time need ``claims`` moved ahead of ``cards``.

Revision ID: 0001
Revises:
Create Date: 2025-07-09 23:35:32.836000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "games",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("which_player_turn", sa.Text(), nullable=False),
        sa.Column("state", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column(
            "started_at",
            sa.TIMESTAMP(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column("round_number", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("card_to_play", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("which_player_turn"),
    )

    op.create_table(
        "players",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=True, server_default=sa.text("0")),
        sa.Column(
            "joined_at",
            sa.TIMESTAMP(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "cards",
        sa.Column("card_type", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("player_id", sa.Text(), nullable=True),
        sa.Column("claim_id", sa.Text(), nullable=True),
        sa.Column("id", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"]),
        sa.ForeignKeyConstraint(["claim_id"], ["claims.id"]),
    )

    op.create_table(
        "chats",
        sa.Column(
            "number_of_messages", sa.Integer(), nullable=False, server_default=sa.text("0")
        ),
        sa.Column("id", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "chat_messages",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("player_id", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "sent_at",
            sa.TIMESTAMP(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column("chat_id", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"]),
        sa.ForeignKeyConstraint(["chat_id"], ["chats.id"]),
    )

    op.create_table(
        "claims",
        sa.Column("created_by", sa.Text(), nullable=False),
        sa.Column(
            "number_of_cards", sa.Integer(), nullable=False, server_default=sa.text("0")
        ),
        sa.Column("id", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["created_by"], ["players.id"]),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("chat_messages")
    op.drop_table("chats")
    op.drop_table("cards")
    op.drop_table("claims")
    op.drop_table("players")
    op.drop_table("games")
