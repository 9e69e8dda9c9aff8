"""Unit tests for the entity base models and order status rules."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from minicommerce_api.core.database.entities.categories import CategoryBase
from minicommerce_api.core.database.entities.orders import Order, OrderItem, OrderItemBase, OrderStatus
from minicommerce_api.core.database.entities.products import ProductBase
from minicommerce_api.core.database.entities.reviews import ReviewBase
from minicommerce_api.core.database.entities.users import User, UserBase


class TestUserBase:
    """Test user field constraints."""

    def test_valid(self):
        """Test a valid instance is accepted."""
        user = UserBase(name="Ada", email="ada@example.com")
        assert user.name == "Ada"

    def test_name_too_long(self):
        """Test names are limited to 80 characters."""
        with pytest.raises(ValidationError):
            UserBase(name="x" * 81, email="ada@example.com")

    def test_repr(self):
        """Test the repr shows the e-mail."""
        user = User(id=3, name="Ada", email="ada@example.com")
        assert "ada@example.com" in repr(user)


class TestCategoryBase:
    """Test category field constraints."""

    def test_empty_name_rejected(self):
        """Test an empty name is rejected."""
        with pytest.raises(ValidationError):
            CategoryBase(name="", slug="")


class TestProductBase:
    """Test product field constraints."""

    def test_valid(self):
        """Test a valid instance is accepted."""
        product = ProductBase(name="Laptop", sku="SKU-1", price=Decimal("999.99"), category_id=1)
        assert product.stock == 0

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1.00")])
    def test_price_must_be_positive(self, price):
        """Test zero and negative prices are rejected."""
        with pytest.raises(ValidationError):
            ProductBase(name="Laptop", sku="SKU-1", price=price, category_id=1)

    def test_negative_stock_rejected(self):
        """Test stock cannot go below zero."""
        with pytest.raises(ValidationError):
            ProductBase(name="Laptop", sku="SKU-1", price=Decimal("1.00"), stock=-1, category_id=1)


class TestOrderItemBase:
    """Test order item constraints."""

    def test_quantity_must_be_positive(self):
        """Test a line needs at least one unit."""
        with pytest.raises(ValidationError):
            OrderItemBase(product_id=1, quantity=0, unit_price=Decimal("1.00"), line_total=Decimal("0.00"))

    def test_items_are_deleted_with_their_order(self):
        """Test the order foreign key cascades on delete."""
        (foreign_key,) = OrderItem.__table__.c.order_id.foreign_keys
        assert foreign_key.column.table.name == "orders"
        assert foreign_key.ondelete == "CASCADE"


class TestReviewBase:
    """Test review field constraints."""

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_range(self, rating):
        """Test ratings outside 1..5 are rejected."""
        with pytest.raises(ValidationError):
            ReviewBase(user_id=1, product_id=1, rating=rating)

    def test_comment_optional(self):
        """Test the comment may be left out."""
        assert ReviewBase(user_id=1, product_id=1, rating=5).comment is None


class TestOrderStatus:
    """Test the order status values and transitions."""

    def test_allowed_lists_every_status(self):
        """Test the allowed statuses are listed in declaration order."""
        assert OrderStatus.allowed() == ["CREATED", "PAID", "CANCELLED"]

    @pytest.mark.parametrize(
        "status,terminal",
        [(OrderStatus.CREATED, False), (OrderStatus.PAID, True), (OrderStatus.CANCELLED, True)],
    )
    def test_terminal_states(self, status, terminal):
        """Test only PAID and CANCELLED are terminal."""
        assert status.is_terminal is terminal

    def test_order_defaults_to_created(self):
        """Test a new order starts CREATED with a zero total."""
        order = Order(user_id=1)
        assert order.order_status is OrderStatus.CREATED
        assert order.total == Decimal("0.00")
