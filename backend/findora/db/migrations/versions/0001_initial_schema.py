"""Initial schema: users, seller_profiles, seller_documents.

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-17
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("hashed_password", sa.Text(), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="BUYER"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "seller_profiles",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("business_name", sa.String(255), nullable=False),
        sa.Column("business_type", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("website", sa.String(2048), nullable=True),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("business_email", sa.String(320), nullable=True),
        sa.Column("contact_person_name", sa.String(255), nullable=False),
        sa.Column("address_line1", sa.String(255), nullable=False),
        sa.Column("address_line2", sa.String(255), nullable=True),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("state", sa.String(100), nullable=False),
        sa.Column("country", sa.String(100), nullable=False),
        sa.Column("postal_code", sa.String(20), nullable=False),
        sa.Column("tax_id", sa.String(100), nullable=False),
        sa.Column("gst_vat_number", sa.String(100), nullable=True),
        sa.Column("business_license", sa.String(100), nullable=False),
        sa.Column("years_in_business", sa.Integer(), nullable=True),
        sa.Column("facebook_url", sa.String(2048), nullable=True),
        sa.Column("instagram_url", sa.String(2048), nullable=True),
        sa.Column("linkedin_url", sa.String(2048), nullable=True),
        sa.Column("twitter_url", sa.String(2048), nullable=True),
        sa.Column("bank_account_holder", sa.String(255), nullable=False),
        sa.Column("bank_name", sa.String(255), nullable=False),
        sa.Column("account_number", sa.String(64), nullable=False),
        sa.Column("ifsc_swift_code", sa.String(64), nullable=False),
        sa.Column("bank_branch_address", sa.Text(), nullable=True),
        sa.Column("product_categories", sa.JSON(), nullable=False),
        sa.Column("manages_own_shipping", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("needs_shipping_help", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("terms_accepted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("terms_accepted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("verification_status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column("documents_submitted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("average_rating", sa.Float(), nullable=False, server_default="0"),
        sa.Column("total_ratings", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_sales", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    # One profile per user; concurrent registrations lose on this constraint
    op.create_index("ix_seller_profiles_user_id", "seller_profiles", ["user_id"], unique=True)
    op.create_index("ix_seller_profiles_verification_status", "seller_profiles", ["verification_status"])

    op.create_table(
        "seller_documents",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "seller_profile_id",
            sa.Uuid(),
            sa.ForeignKey("seller_profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("document_type", sa.String(50), nullable=False),
        sa.Column("filename", sa.String(500), nullable=False),
        sa.Column("content_type", sa.String(100), nullable=False),
        sa.Column("size_bytes", sa.Integer(), nullable=False),
        sa.Column("sha256", sa.String(64), nullable=False),
        sa.Column("storage_key", sa.String(1000), nullable=False),
        sa.Column("uploaded_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("seller_profile_id", "document_type", name="uq_seller_documents_profile_type"),
    )
    op.create_index("ix_seller_documents_seller_profile_id", "seller_documents", ["seller_profile_id"])


def downgrade() -> None:
    op.drop_table("seller_documents")
    op.drop_table("seller_profiles")
    op.drop_table("users")
