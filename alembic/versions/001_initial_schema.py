"""Initial schema - permissions, implications, roles, grants, role assignments.

Revision ID: 001
Revises:
Create Date: 2025-01-02

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "acl_role",
        sa.Column("id", sa.BigInteger(), sa.Identity(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("resource_type", sa.String(255), nullable=True),
        sa.Column("description", sa.String(255), nullable=True),
    )
    # NULL resource_type (global role) must collide with itself
    op.execute(
        "CREATE UNIQUE INDEX ux_acl_role_name_resource_type "
        "ON acl_role (name, COALESCE(resource_type, ''))"
    )

    op.create_table(
        "acl_permission",
        sa.Column("id", sa.BigInteger(), sa.Identity(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("resource_type", sa.String(255), nullable=True),
    )
    op.create_index("ix_acl_permission_name", "acl_permission", ["name"], unique=True)

    op.create_table(
        "acl_role_permission",
        sa.Column(
            "role_id",
            sa.BigInteger(),
            sa.ForeignKey("acl_role.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "permission_id",
            sa.BigInteger(),
            sa.ForeignKey("acl_permission.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "effect",
            sa.Enum("ALLOW", "DENY", name="acl_effect"),
            nullable=False,
            server_default="ALLOW",
        ),
    )
    op.create_index("ix_acl_role_permission_permission", "acl_role_permission", ["permission_id"])

    op.create_table(
        "acl_role_assignment",
        sa.Column("id", sa.BigInteger(), sa.Identity(), primary_key=True),
        sa.Column("subject_type", sa.String(255), nullable=False),
        sa.Column("subject_id", sa.BigInteger(), nullable=False),
        sa.Column(
            "role_id",
            sa.BigInteger(),
            sa.ForeignKey("acl_role.id", ondelete="RESTRICT", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column("resource_type", sa.String(255), nullable=True),
        sa.Column("resource_id", sa.BigInteger(), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "(resource_type IS NULL) = (resource_id IS NULL)",
            name="ck_acl_role_assignment_resource",
        ),
    )
    # One role per (subject, resource); a global assignment has NULL resource
    op.execute(
        "CREATE UNIQUE INDEX ux_acl_role_assignment_subject_resource "
        "ON acl_role_assignment "
        "(subject_type, subject_id, COALESCE(resource_type, ''), COALESCE(resource_id, 0))"
    )
    op.create_index("ix_acl_role_assignment_role", "acl_role_assignment", ["role_id"])

    op.create_table(
        "acl_permission_implication",
        sa.Column(
            "parent_permission_id",
            sa.BigInteger(),
            sa.ForeignKey("acl_permission.id", ondelete="CASCADE", onupdate="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "child_permission_id",
            sa.BigInteger(),
            sa.ForeignKey("acl_permission.id", ondelete="CASCADE", onupdate="CASCADE"),
            primary_key=True,
        ),
    )
    op.create_index(
        "ix_acl_permission_implication_child",
        "acl_permission_implication",
        ["child_permission_id"],
    )


def downgrade() -> None:
    op.drop_table("acl_permission_implication")
    op.drop_table("acl_role_assignment")
    op.drop_table("acl_role_permission")
    op.drop_table("acl_permission")
    op.drop_table("acl_role")
    op.execute("DROP TYPE IF EXISTS acl_effect")
