"""Initial team schema

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

Creates the schema for the Team aggregate:
- Teams (tenant workspaces, unique subdomain and domain)
- Users
- Collections and Documents
- Team domains (sign-in allow-list)
- Authentication providers
- Attachments
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(soft_delete: bool = False) -> list:
    columns = [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]
    if soft_delete:
        columns.append(sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True))
    return columns


def upgrade() -> None:
    # Create teams table
    op.create_table(
        "teams",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("subdomain", sa.String(32), nullable=True, unique=True),
        sa.Column("domain", sa.String(255), nullable=True, unique=True),
        sa.Column("default_collection_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("avatar_url", sa.String(4096), nullable=True),
        sa.Column("sharing", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("invite_required", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("guest_signin", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("document_embeds", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("member_collection_create", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("collaborative_editing", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("default_user_role", sa.String(20), nullable=False, server_default="member"),
        sa.Column("signup_query_params", sa.JSON(), nullable=True),
        sa.Column("preferences", sa.JSON(), nullable=True),
        *_timestamps(soft_delete=True),
    )

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("team_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="member"),
        *_timestamps(soft_delete=True),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_users_team_id", "users", ["team_id"])
    op.create_index("ix_users_email", "users", ["email"])

    # Create collections table
    op.create_table(
        "collections",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("team_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("created_by_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("sort", sa.JSON(), nullable=False),
        sa.Column("permission", sa.String(50), nullable=True),
        sa.Column("document_structure", sa.JSON(), nullable=True),
        *_timestamps(soft_delete=True),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["created_by_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_collections_team_id", "collections", ["team_id"])

    # Create documents table
    op.create_table(
        "documents",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("team_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("collection_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("parent_document_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("created_by_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("last_modified_by_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(255), nullable=False, server_default=""),
        sa.Column("text", sa.Text(), nullable=False, server_default=""),
        sa.Column("version", sa.Integer(), nullable=False, server_default="2"),
        sa.Column("is_welcome", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("template", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(soft_delete=True),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["collection_id"], ["collections.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_document_id"], ["documents.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["created_by_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["last_modified_by_id"], ["users.id"]),
    )
    op.create_index("ix_documents_team_id", "documents", ["team_id"])
    op.create_index("ix_documents_collection_id", "documents", ["collection_id"])

    # Create team_domains table
    op.create_table(
        "team_domains",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("team_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("created_by_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["created_by_id"], ["users.id"], ondelete="SET NULL"),
        sa.UniqueConstraint("team_id", "name", name="uq_team_domain_name"),
    )
    op.create_index("ix_team_domains_team_id", "team_domains", ["team_id"])

    # Create authentication_providers table
    op.create_table(
        "authentication_providers",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("team_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("provider_id", sa.String(255), nullable=False),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("name", "provider_id", name="uq_authentication_provider"),
    )
    op.create_index("ix_authentication_providers_team_id", "authentication_providers", ["team_id"])

    # Create attachments table
    op.create_table(
        "attachments",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("team_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("document_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("key", sa.String(4096), nullable=False),
        sa.Column("content_type", sa.String(255), nullable=False),
        sa.Column("size", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("acl", sa.String(50), nullable=False, server_default="private"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["document_id"], ["documents.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_attachments_team_id", "attachments", ["team_id"])


def downgrade() -> None:
    # Drop tables in reverse order (respecting foreign keys)
    op.drop_table("attachments")
    op.drop_table("authentication_providers")
    op.drop_table("team_domains")
    op.drop_table("documents")
    op.drop_table("collections")
    op.drop_table("users")
    op.drop_table("teams")
