"""add password reset tokens to users

Revision ID: 9f4e2b6d1c83
Revises: 3c1d7f0a9b42
Create Date: 2026-10-19 15:40:12.118504

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9f4e2b6d1c83"
down_revision: Union[str, Sequence[str], None] = "3c1d7f0a9b42"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "users",
        sa.Column("reset_token_hash", sa.String(length=64), nullable=True),
    )
    op.add_column(
        "users",
        sa.Column(
            "reset_token_expires_at", sa.TIMESTAMP(timezone=True), nullable=True
        ),
    )
    op.create_unique_constraint(
        "users_reset_token_hash_key", "users", ["reset_token_hash"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_constraint("users_reset_token_hash_key", "users", type_="unique")
    op.drop_column("users", "reset_token_expires_at")
    op.drop_column("users", "reset_token_hash")
