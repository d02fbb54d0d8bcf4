"""Create delivery admin tables

Revision ID: 20261019_create_delivery_admin_tables
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "20261019_create_delivery_admin_tables"
down_revision = None
branch_labels = None
depends_on = None


def _id():
    return sa.Column("id", sa.String(36), primary_key=True)


def _created_at():
    return sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False)


def _updated_at():
    return sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False)


def upgrade() -> None:
    op.create_table(
        "admin_users",
        _id(),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(120), nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        _created_at(),
        sa.Column("last_sign_in_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "categories",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(120), nullable=True, unique=True),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("order_index", sa.Integer, nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        _created_at(),
    )

    op.create_table(
        "restaurants",
        _id(),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("slug", sa.String(160), nullable=False, unique=True, index=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("cover_image_url", sa.String(500), nullable=True),
        sa.Column("rating", sa.Numeric(3, 2), nullable=False, server_default="0"),
        sa.Column("review_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("delivery_time_min", sa.Integer, nullable=False, server_default="30"),
        sa.Column("delivery_fee", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("minimum_order", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("category_id", sa.String(36), sa.ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True),
        sa.Column("address", sa.String(255), nullable=True),
        sa.Column("latitude", sa.Float, nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        sa.Column("phone", sa.String(40), nullable=True),
        sa.Column("is_featured", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "menu_items",
        _id(),
        sa.Column("restaurant_id", sa.String(36), sa.ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("category", sa.String(100), nullable=False, server_default="", index=True),
        sa.Column("is_available", sa.Boolean, nullable=False, server_default=sa.text("true")),
        sa.Column("is_vegetarian", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("is_vegan", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("is_spicy", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("calories", sa.Integer, nullable=False, server_default="0"),
        sa.Column("order_index", sa.Integer, nullable=False, server_default="0"),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "addons",
        _id(),
        sa.Column("menu_item_id", sa.String(36), sa.ForeignKey("menu_items.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("is_required", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("max_selections", sa.Integer, nullable=True),
        sa.Column("order_index", sa.Integer, nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        _created_at(),
    )

    op.create_table(
        "addon_options",
        _id(),
        sa.Column("addon_id", sa.String(36), sa.ForeignKey("addons.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("order_index", sa.Integer, nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        _created_at(),
    )

    op.create_table(
        "events",
        _id(),
        sa.Column("restaurant_id", sa.String(36), sa.ForeignKey("restaurants.id"), nullable=False, index=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("event_date", sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column("start_time", sa.Time, nullable=False),
        sa.Column("end_time", sa.Time, nullable=False),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("cover_image_url", sa.String(500), nullable=True),
        sa.Column("has_dj", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("dj_name", sa.String(150), nullable=True),
        sa.Column("dj_contact", sa.String(150), nullable=True),
        sa.Column("max_attendees", sa.Integer, nullable=True),
        sa.Column("ticket_price", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "user_profiles",
        _id(),
        sa.Column("email", sa.String(255), nullable=True, index=True),
        sa.Column("full_name", sa.String(150), nullable=True),
        _created_at(),
    )

    op.create_table(
        "party_requests",
        _id(),
        sa.Column("user_id", sa.String(36), nullable=False, index=True),
        sa.Column("restaurant_id", sa.String(36), sa.ForeignKey("restaurants.id"), nullable=False, index=True),
        sa.Column("event_name", sa.String(200), nullable=False),
        sa.Column("event_date", sa.Date, nullable=False),
        sa.Column("start_time", sa.Time, nullable=True),
        sa.Column("end_time", sa.Time, nullable=True),
        sa.Column("expected_attendees", sa.Integer, nullable=True),
        sa.Column("requires_dj", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("special_requirements", sa.Text, nullable=True),
        sa.Column("contact_phone", sa.String(40), nullable=True),
        sa.Column("contact_email", sa.String(255), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending", index=True),
        sa.Column("admin_notes", sa.Text, nullable=True),
        _created_at(),
    )

    op.create_table(
        "notifications",
        _id(),
        sa.Column("user_id", sa.String(36), nullable=False, index=True),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("related_id", sa.String(36), nullable=True),
        sa.Column("is_read", sa.Boolean, nullable=False, server_default=sa.text("false")),
        _created_at(),
    )

    op.create_table(
        "special_offers",
        _id(),
        sa.Column("restaurant_id", sa.String(36), sa.ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=True, index=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("discount_type", sa.String(20), nullable=False, server_default="percentage"),
        sa.Column("discount_value", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("minimum_order", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("max_discount", sa.Numeric(10, 2), nullable=True),
        sa.Column("code", sa.String(50), nullable=True, unique=True),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        sa.Column("usage_limit", sa.Integer, nullable=True),
        sa.Column("usage_count", sa.Integer, nullable=False, server_default="0"),
        _created_at(),
    )

    op.create_table(
        "riders",
        _id(),
        sa.Column("user_id", sa.String(36), nullable=True, index=True),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("phone", sa.String(40), nullable=False),
        sa.Column("vehicle_type", sa.String(20), nullable=False, server_default="bike"),
        sa.Column("vehicle_number", sa.String(40), nullable=True),
        sa.Column("license_number", sa.String(60), nullable=True),
        sa.Column("current_latitude", sa.Float, nullable=True),
        sa.Column("current_longitude", sa.Float, nullable=True),
        sa.Column("is_available", sa.Boolean, nullable=False, server_default=sa.text("true")),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "orders",
        _id(),
        sa.Column("user_id", sa.String(36), nullable=False, index=True),
        sa.Column("restaurant_id", sa.String(36), sa.ForeignKey("restaurants.id"), nullable=False, index=True),
        sa.Column("order_number", sa.String(40), nullable=False, unique=True),
        sa.Column("status", sa.String(30), nullable=False, server_default="pending", index=True),
        sa.Column("subtotal", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("delivery_fee", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("tax", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("total", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("delivery_address", sa.Text, nullable=True),
        sa.Column("payment_method", sa.String(30), nullable=True),
        sa.Column("payment_status", sa.String(30), nullable=True),
        sa.Column("rider_id", sa.String(36), sa.ForeignKey("riders.id", ondelete="SET NULL"), nullable=True, index=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "order_items",
        _id(),
        sa.Column("order_id", sa.String(36), sa.ForeignKey("orders.id"), nullable=False, index=True),
        sa.Column("menu_item_id", sa.String(36), sa.ForeignKey("menu_items.id", ondelete="SET NULL"), nullable=True),
        sa.Column("menu_item_name", sa.String(150), nullable=True),
        sa.Column("quantity", sa.Integer, nullable=False, server_default="1"),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("subtotal", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("special_instructions", sa.Text, nullable=True),
    )

    op.create_table(
        "order_tracking",
        _id(),
        sa.Column("order_id", sa.String(36), sa.ForeignKey("orders.id"), nullable=False, index=True),
        sa.Column("status", sa.String(30), nullable=False),
        sa.Column("notes", sa.Text, nullable=True),
        _created_at(),
    )

    op.create_table(
        "files",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("url", sa.String(1000), nullable=False),
        sa.Column("path", sa.String(500), nullable=False),
        sa.Column("size", sa.BigInteger, nullable=False, server_default="0"),
        sa.Column("mime_type", sa.String(150), nullable=True),
        sa.Column("is_public", sa.Boolean, nullable=False, server_default=sa.text("true")),
        _created_at(),
    )

    op.create_table(
        "app_config",
        _id(),
        sa.Column("key", sa.String(100), nullable=False, unique=True, index=True),
        sa.Column("value", postgresql.JSONB, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        _updated_at(),
    )

    op.create_table(
        "content",
        _id(),
        sa.Column("page", sa.String(100), nullable=False, server_default="home", index=True),
        sa.Column("section", sa.String(100), nullable=False, server_default="default"),
        sa.Column("title", sa.String(200), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("content", postgresql.JSONB, nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("order_index", sa.Integer, nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        _created_at(),
        _updated_at(),
    )


def downgrade() -> None:
    for table in (
        "content",
        "app_config",
        "files",
        "order_tracking",
        "order_items",
        "orders",
        "riders",
        "special_offers",
        "notifications",
        "party_requests",
        "user_profiles",
        "events",
        "addon_options",
        "addons",
        "menu_items",
        "restaurants",
        "categories",
        "admin_users",
    ):
        op.drop_table(table)
