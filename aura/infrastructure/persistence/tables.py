"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    LargeBinary,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# APPS TABLE (soft-deleted via deleted_at, never physically removed)
# ============================================================================
apps_table = Table(
    "apps",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(50), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("deleted_at", DateTime(timezone=True), nullable=True),
)

Index("idx_apps_name", apps_table.c.name)


# ============================================================================
# RELEASES TABLE (append-only)
# ============================================================================
releases_table = Table(
    "releases",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("app_id", String(36), ForeignKey("apps.id", ondelete="CASCADE"), nullable=False),
    Column("image", Text, nullable=False),  # str(ImageReference)
    Column("version", Integer, nullable=False),
    Column("manifest", LargeBinary, nullable=False),  # Procfile contents
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("app_id", "version", name="uq_releases_app_version"),
)
