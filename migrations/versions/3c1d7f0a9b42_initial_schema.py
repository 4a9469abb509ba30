"""initial_schema

Create the schema for Wingman:
- Users (email/password accounts with optional bio)
- Partnerships (one row per matched pair, stored in canonical order)
- Partnership requests (pending/accepted/rejected, one pending per pair)
- Invitations (email invitations redeemed at registration)

Revision ID: 3c1d7f0a9b42
Revises:
Create Date: 2026-10-19 10:12:44.301822

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1d7f0a9b42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13; pgcrypto covers older servers
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE request_status AS ENUM ('pending', 'accepted', 'rejected');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE invitation_status AS ENUM ('pending', 'accepted');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),  # Stored lowercase
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="users_email_key"),
    )
    op.create_index("idx_users_created_at", "users", ["created_at", "id"])

    # ========================================================================
    # PARTNERSHIPS table
    # ========================================================================
    op.create_table(
        "partnerships",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("user1_id", sa.UUID(), nullable=False),
        sa.Column("user2_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user1_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user2_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user1_id", "user2_id", name="uq_partnership_pair"),
        sa.CheckConstraint(
            "user1_id::text < user2_id::text", name="partnership_canonical"
        ),
    )
    op.create_index(
        "uq_partnerships_user1", "partnerships", ["user1_id"], unique=True
    )
    op.create_index(
        "uq_partnerships_user2", "partnerships", ["user2_id"], unique=True
    )

    # ========================================================================
    # PARTNERSHIP_REQUESTS table
    # ========================================================================
    op.create_table(
        "partnership_requests",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("sender_id", sa.UUID(), nullable=False),
        sa.Column("receiver_id", sa.UUID(), nullable=False),
        sa.Column(
            "status",
            sa.Enum(
                "pending",
                "accepted",
                "rejected",
                name="request_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("responded_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["sender_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["receiver_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("sender_id <> receiver_id", name="request_distinct_users"),
    )
    op.create_index(
        "idx_partnership_requests_sender_id", "partnership_requests", ["sender_id"]
    )
    op.create_index(
        "idx_partnership_requests_receiver_id",
        "partnership_requests",
        ["receiver_id"],
    )
    # One pending request per unordered pair
    op.execute("""
        CREATE UNIQUE INDEX uq_partnership_requests_pending_pair
        ON partnership_requests (
            LEAST(sender_id, receiver_id),
            GREATEST(sender_id, receiver_id)
        )
        WHERE status = 'pending'
    """)

    # ========================================================================
    # INVITATIONS table
    # ========================================================================
    op.create_table(
        "invitations",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("sender_id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("token", sa.String(255), nullable=False),
        sa.Column(
            "status",
            sa.Enum(
                "pending", "accepted", name="invitation_status", create_type=False
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("accepted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("accepted_by_user_id", sa.UUID(), nullable=True),
        sa.ForeignKeyConstraint(["sender_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["accepted_by_user_id"], ["users.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token", name="invitations_token_key"),
    )
    op.create_index("idx_invitations_sender_id", "invitations", ["sender_id"])
    op.create_index("idx_invitations_email", "invitations", ["email"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("invitations")
    op.execute("DROP INDEX IF EXISTS uq_partnership_requests_pending_pair")
    op.drop_table("partnership_requests")
    op.drop_table("partnerships")
    op.drop_table("users")
    op.execute("DROP TYPE IF EXISTS invitation_status")
    op.execute("DROP TYPE IF EXISTS request_status")
