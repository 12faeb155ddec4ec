"""Unit tests for the Product and User aggregates."""

import pytest

from marketplace.domain.exceptions import AuthorizationError, ValidationError
from marketplace.domain.model.product import DEFAULT_IMAGE, Category, Product
from marketplace.domain.model.user import Role, User
from marketplace.domain.model.value_objects import Money
from tests.builders import make_product, make_user


def _create(**overrides) -> Product:
    fields = dict(
        id="1",
        seller_id="s1",
        title="  Desk Lamp ",
        description="Warm light",
        price=Money.of("30"),
        category=Category.HOME,
    )
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreation:

    def test_happy_path(self):
        product = _create()
        assert product.title == "Desk Lamp"
        assert product.stock == 0
        assert product.is_available
        assert product.image == DEFAULT_IMAGE

    @pytest.mark.parametrize("field", ["title", "description"])
    def test_required_text(self, field):
        with pytest.raises(ValidationError, match=f"{field} is required"):
            _create(**{field: "   "})

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _create(stock=-1)

    def test_category_parse_is_case_insensitive(self):
        assert Category.parse("Books") is Category.BOOKS

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError, match="Unknown category"):
            Category.parse("toys")


class TestProductMutations:

    def test_update_details_touches_timestamp(self):
        product = make_product()
        before = product.updated_at
        product.update_details("New", "Better", Money.of("12"), Category.SPORTS, is_available=False)

        assert product.title == "New"
        assert product.category is Category.SPORTS
        assert not product.is_available
        assert product.updated_at >= before

    def test_toggle_availability(self):
        product = make_product()
        assert product.toggle_availability() is False
        assert product.status == "inactive"
        assert product.toggle_availability() is True

    def test_low_stock_threshold(self):
        assert make_product(stock=9).is_low_stock
        assert not make_product(stock=10).is_low_stock

    def test_ownership(self):
        product = make_product(seller_id="s1")
        product.ensure_owned_by("s1")
        with pytest.raises(AuthorizationError, match="Forbidden"):
            product.ensure_owned_by("s2")


class TestUser:

    def test_register_normalizes(self):
        user = User.register(id="1", email=" Bob@Example.COM ", password_hash="x", name=" ")
        assert user.email == "bob@example.com"
        assert user.name == "Anonymous"
        assert user.role is Role.BUYER

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError, match="Invalid email"):
            User.register(id="1", email="bob", password_hash="x")

    def test_role_parse_defaults_to_buyer(self):
        assert Role.parse(None) is Role.BUYER
        assert Role.parse("SELLER") is Role.SELLER

    def test_ensure_role(self):
        make_user(role=Role.SELLER).ensure_role(Role.SELLER)
        with pytest.raises(AuthorizationError, match="Seller account required"):
            make_user(role=Role.BUYER).ensure_role(Role.SELLER)

    def test_update_profile(self):
        user = make_user(email="alice@example.com")
        user.update_profile(name="  ", email=" Alice@Work.com")
        assert user.name == "Anonymous"
        assert user.email == "alice@work.com"

        user.update_profile(name="Ali")
        assert user.email == "alice@work.com"
        assert user.name == "Ali"
