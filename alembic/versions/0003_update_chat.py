"""update_chat

Rebuilds ``chats`` with a mandatory ``game_id`` reference to ``games``.

This is a drop-and-create, so existing chats are lost.  ``chat_messages``
is not touched: with foreign keys enforced, SQLite refuses to drop a
``chats`` table that messages still point at, the revision fails and the
database stays at 0001.  Remove or archive those messages first.

SQLite DDL is not transactional here (Alembic assumes non-transactional
DDL), so nothing is rolled back on failure.  The version table is only
left at 0001 because the drop is the first statement; keep it first.

Revision ID: 0003
Revises: 0001
Create Date: 2025-07-14 18:02:11.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0003"
down_revision: Union[str, Sequence[str], None] = "0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.drop_table("chats")

    op.create_table(
        "chats",
        sa.Column(
            "number_of_messages", sa.Integer(), nullable=False, server_default=sa.text("0")
        ),
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("game_id", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"]),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("chats")

    op.create_table(
        "chats",
        sa.Column(
            "number_of_messages", sa.Integer(), nullable=False, server_default=sa.text("0")
        ),
        sa.Column("id", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
