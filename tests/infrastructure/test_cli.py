"""End-to-end tests for the click CLI against a temporary data directory."""

import json
import logging

import pytest
import structlog
from click.testing import CliRunner

from marketplace.infrastructure.cli import auth_commands
from marketplace.infrastructure.cli.main import cli
from marketplace.infrastructure.security.bcrypt_hasher import BcryptPasswordHasher


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("MARKET_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("MARKET_ENV", "test")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(auth_commands, "password_hasher", lambda: BcryptPasswordHasher(rounds=4))

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(cli, list(args))

    yield invoke

    root.handlers, root.level = saved_handlers, saved_level
    structlog.reset_defaults()


def _register(run, name, email, role="buyer"):
    result = run(
        "auth", "register",
        "--name", name, "--email", email, "--password", "hunter22", "--role", role,
    )
    assert result.exit_code == 0, result.output
    return result


def _seller_with_lamp(run):
    _register(run, "Sam", "sam@shop.com", role="seller")
    result = run(
        "product", "add",
        "--title", "Lamp", "--description", "Warm light",
        "--price", "30.00", "--category", "home", "--stock", "5",
    )
    assert result.exit_code == 0, result.output
    run("auth", "logout")


class TestAuthCommands:

    def test_register_and_whoami(self, run):
        result = _register(run, "Alice", "alice@example.com")
        assert "Welcome, Alice!" in result.output

        result = run("auth", "whoami")
        assert "alice@example.com" in result.output
        assert "role=buyer" in result.output

    def test_login_with_wrong_password(self, run):
        _register(run, "Alice", "alice@example.com")
        run("auth", "logout")

        result = run("auth", "login", "--email", "alice@example.com", "--password", "nope")
        assert result.exit_code == 1
        assert "Invalid email or password" in result.output

    def test_logout_twice(self, run):
        _register(run, "Alice", "alice@example.com")
        assert "Logged out." in run("auth", "logout").output
        assert "Not logged in." in run("auth", "logout").output

    def test_commands_require_login(self, run):
        result = run("cart", "show")
        assert result.exit_code == 1
        assert "Please log in first" in result.output


class TestShoppingFlow:

    def test_browse_add_and_checkout(self, run):
        _seller_with_lamp(run)
        _register(run, "Bob", "bob@example.com")

        assert "Lamp" in run("product", "list", "--category", "home").output

        result = run("cart", "add", "--id", "1", "--qty", "2")
        assert result.exit_code == 0, result.output
        assert "$60.00" in result.output

        result = run("order", "checkout")
        assert result.exit_code == 0, result.output
        assert "Thank you! Order #1 placed." in result.output
        assert "Your cart is empty." in run("cart", "show").output
        assert "#1" in run("order", "list").output

    def test_checkout_with_empty_cart(self, run):
        _register(run, "Bob", "bob@example.com")
        result = run("order", "checkout")
        assert result.exit_code == 1
        assert "Your cart is empty" in result.output

    def test_adding_unknown_product(self, run):
        _register(run, "Bob", "bob@example.com")
        result = run("cart", "add", "--id", "404")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_logout_discards_cart(self, run):
        _seller_with_lamp(run)
        _register(run, "Bob", "bob@example.com")
        run("cart", "add", "--id", "1")
        run("auth", "logout")
        run("auth", "login", "--email", "bob@example.com", "--password", "hunter22")

        assert "Your cart is empty." in run("cart", "show").output

    def test_logging_in_again_keeps_cart(self, run):
        _seller_with_lamp(run)
        _register(run, "Bob", "bob@example.com")
        run("cart", "add", "--id", "1", "--qty", "2")

        result = run("auth", "login", "--email", "bob@example.com", "--password", "hunter22")
        assert result.exit_code == 0, result.output

        result = run("cart", "show")
        assert "Your cart is empty." not in result.output
        assert "$60.00" in result.output

    def test_switching_user_discards_previous_cart(self, run, tmp_path):
        _seller_with_lamp(run)
        _register(run, "Bob", "bob@example.com")
        run("cart", "add", "--id", "1", "--qty", "2")

        run("auth", "login", "--email", "sam@shop.com", "--password", "hunter22")

        assert json.loads((tmp_path / "carts.json").read_text()) == {}
        assert "Your cart is empty." in run("cart", "show").output


class TestSellerCommands:

    def test_buyer_cannot_use_seller_commands(self, run):
        _register(run, "Bob", "bob@example.com")
        result = run("seller", "dashboard")
        assert result.exit_code == 1
        assert "Access denied. Seller account required." in result.output

    def test_fulfil_order_and_see_revenue(self, run):
        _seller_with_lamp(run)
        _register(run, "Bob", "bob@example.com")
        run("cart", "add", "--id", "1", "--qty", "2")
        run("order", "checkout")
        run("auth", "login", "--email", "sam@shop.com", "--password", "hunter22")

        result = run("seller", "status", "--id", "1", "--status", "completed")
        assert result.exit_code == 0, result.output
        assert "Order #1 is now delivered." in result.output

        result = run("seller", "dashboard")
        assert "$60.00" in result.output
        assert "Delivered orders: 1" in result.output

        result = run("seller", "status", "--id", "1", "--status", "cancelled")
        assert result.exit_code == 1
        assert "already delivered" in result.output

    def test_inventory_flags_low_stock(self, run):
        _seller_with_lamp(run)
        run("auth", "login", "--email", "sam@shop.com", "--password", "hunter22")

        result = run("seller", "inventory")
        assert "Lamp" in result.output
        assert "LOW" in result.output

    def test_profile_show_and_update(self, run):
        _seller_with_lamp(run)
        run("auth", "login", "--email", "sam@shop.com", "--password", "hunter22")

        result = run("seller", "profile")
        assert "Sam <sam@shop.com>" in result.output

        result = run(
            "seller", "profile-update", "--name", "Sam's Lamps", "--email", "Lamps@Shop.com"
        )
        assert result.exit_code == 0, result.output
        assert "Sam's Lamps <lamps@shop.com>" in result.output

        run("auth", "logout")
        result = run("auth", "login", "--email", "lamps@shop.com", "--password", "hunter22")
        assert "Logged in as Sam's Lamps (seller)." in result.output

    def test_profile_update_rejects_taken_email(self, run):
        _register(run, "Bob", "bob@example.com")
        _register(run, "Sam", "sam@shop.com", role="seller")

        result = run("seller", "profile-update", "--email", "BOB@example.com")
        assert result.exit_code == 1
        assert "already registered" in result.output
        assert "sam@shop.com" in run("seller", "profile").output
