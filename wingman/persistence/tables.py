"""SQLAlchemy table definitions for Wingman.

Tables are used through SQLAlchemy Core with manual row mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(50), nullable=False),
    Column("email", String(255), nullable=False, unique=True),  # Stored lowercase
    Column("bio", Text, nullable=True),
    Column("password_hash", String(255), nullable=False),
    Column("reset_token_hash", String(64), nullable=True, unique=True),
    Column("reset_token_expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_created_at", users_table.c.created_at, users_table.c.id)

# ============================================================================
# PARTNERSHIPS TABLE
# ============================================================================
partnerships_table = Table(
    "partnerships",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "user1_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "user2_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user1_id", "user2_id", name="uq_partnership_pair"),
    CheckConstraint("user1_id::text < user2_id::text", name="partnership_canonical"),
)

# A user sits on one side of at most one partnership
Index("uq_partnerships_user1", partnerships_table.c.user1_id, unique=True)
Index("uq_partnerships_user2", partnerships_table.c.user2_id, unique=True)

# ============================================================================
# PARTNERSHIP REQUESTS TABLE
# ============================================================================
partnership_requests_table = Table(
    "partnership_requests",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "sender_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "receiver_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "status",
        Enum(
            "pending", "accepted", "rejected", name="request_status", create_type=False
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("responded_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("sender_id <> receiver_id", name="request_distinct_users"),
)

Index("idx_partnership_requests_sender_id", partnership_requests_table.c.sender_id)
Index("idx_partnership_requests_receiver_id", partnership_requests_table.c.receiver_id)

# One pending request per unordered pair, whichever direction it was sent in
Index(
    "uq_partnership_requests_pending_pair",
    func.least(
        partnership_requests_table.c.sender_id,
        partnership_requests_table.c.receiver_id,
    ),
    func.greatest(
        partnership_requests_table.c.sender_id,
        partnership_requests_table.c.receiver_id,
    ),
    unique=True,
    postgresql_where=partnership_requests_table.c.status == "pending",
)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "sender_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("email", String(255), nullable=False),
    Column("token", String(255), nullable=False, unique=True),
    Column(
        "status",
        Enum("pending", "accepted", name="invitation_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "accepted_by_user_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
)

Index("idx_invitations_sender_id", invitations_table.c.sender_id)
Index("idx_invitations_email", invitations_table.c.email)
