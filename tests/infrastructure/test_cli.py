"""End-to-end tests for the click CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.config import Settings

CUSTOMER = "user@example.com"
ADMIN = "admin@example.com"


@pytest.fixture
def env(tmp_path):
    return {"STOREFRONT_DATA_DIR": str(tmp_path), "STOREFRONT_LOG_LEVEL": "WARNING"}


@pytest.fixture
def run(env):
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(cli, list(args), env=env)

    result = invoke("seed")
    assert result.exit_code == 0, result.output
    return invoke


@pytest.fixture
def container(env, run):
    return build_container(Settings.from_env(env))


def _address_id(container):
    customer = container.users.get_by_email(CUSTOMER)
    return container.addresses.list_for_user(customer.id)[0].id


def _place_order(run, container, items="prod-tee:2"):
    result = run(
        "order", "create",
        "--user", CUSTOMER,
        "--items", items,
        "--shipping-address", _address_id(container),
        "--payment-method", "card",
    )
    assert result.exit_code == 0, result.output
    customer = container.users.get_by_email(CUSTOMER)
    return container.orders.list_for_user(customer.id)[0]


class TestSeed:

    def test_is_idempotent(self, run, container):
        assert run("seed").exit_code == 0
        assert len(container.products.list_all()) == 3
        customer = container.users.get_by_email(CUSTOMER)
        assert len(container.addresses.list_for_user(customer.id)) == 1

    def test_product_list(self, run):
        result = run("product", "list")
        assert "Pixel Phone" in result.output
        assert "var-phone-256" in result.output

    def test_product_list_by_category(self, run):
        result = run("product", "list", "--category", "clothing")
        assert "Cotton T-Shirt" in result.output
        assert "Pixel Phone" not in result.output

    def test_product_list_search(self, run):
        result = run("product", "list", "--search", "laptop")
        assert "Ultrabook 14" in result.output
        assert "Cotton T-Shirt" not in result.output

    def test_product_list_no_match(self, run):
        result = run("product", "list", "--category", "Garden")
        assert "No products found." in result.output

    def test_product_show(self, run):
        result = run("product", "show", "--slug", "pixel-phone")
        assert result.exit_code == 0, result.output
        assert "Categories: Electronics, Smartphones" in result.output
        assert "all-day battery" in result.output
        assert "var-phone-256" in result.output

    def test_product_show_unknown(self, run):
        result = run("product", "show", "--slug", "nope")
        assert result.exit_code == 1
        assert "Product not found" in result.output


class TestCart:

    def test_add_show_update_clear(self, run, container):
        run("cart", "add", "--product", "cotton-t-shirt")
        run("cart", "add", "--product", "prod-tee")
        assert container.cart_store().total_items == 2

        result = run("cart", "show")
        assert "39.98" in result.output

        run("cart", "update", "--product", "prod-tee", "--quantity", "0")
        assert container.cart_store().is_empty

        run("cart", "add", "--product", "prod-tee")
        assert run("cart", "clear").exit_code == 0
        assert container.cart_store().is_empty

    def test_add_unknown_product(self, run):
        result = run("cart", "add", "--product", "nope")
        assert result.exit_code == 1
        assert "Product not found" in result.output

    def test_checkout(self, run, container):
        run("cart", "add", "--product", "prod-tee")
        run("cart", "add", "--product", "prod-tee")

        result = run(
            "cart", "checkout",
            "--user", CUSTOMER,
            "--shipping-address", _address_id(container),
            "--payment-method", "card",
        )

        assert result.exit_code == 0, result.output
        assert "Checkout complete." in result.output
        assert "55.98" in result.output
        assert container.cart_store().is_empty

    def test_checkout_empty_cart(self, run, container):
        result = run(
            "cart", "checkout",
            "--user", CUSTOMER,
            "--shipping-address", _address_id(container),
            "--payment-method", "card",
        )
        assert result.exit_code == 1
        assert "Cart is empty" in result.output

    def test_checkout_blank_payment_method(self, run, container):
        run("cart", "add", "--product", "prod-tee")
        result = run(
            "cart", "checkout",
            "--user", CUSTOMER,
            "--shipping-address", _address_id(container),
            "--payment-method", "",
        )
        assert result.exit_code == 1
        assert "Invalid data" in result.output
        assert "payment_method" in result.output
        assert container.cart_store().total_items == 1


class TestOrders:

    def test_create_and_list(self, run, container):
        order = _place_order(run, container)
        assert order.total.plain == "55.98"

        result = run("order", "list", "--user", CUSTOMER)
        assert order.order_number in result.output
        assert "Page 1/1" in result.output

    def test_create_with_variant(self, run, container):
        order = _place_order(run, container, items="prod-phone:1:var-phone-256")
        assert order.items[0].price.plain == "799.00"
        assert order.items[0].variant_name == "Black / 256GB"

    def test_create_rejects_bad_item_format(self, run, container):
        result = run(
            "order", "create",
            "--user", CUSTOMER,
            "--items", "prod-tee",
            "--shipping-address", _address_id(container),
            "--payment-method", "card",
        )
        assert result.exit_code == 2

    def test_create_reports_field_errors(self, run, container):
        result = run(
            "order", "create",
            "--user", CUSTOMER,
            "--items", "prod-tee:0",
            "--shipping-address", _address_id(container),
            "--payment-method", "card",
        )
        assert result.exit_code == 1
        assert "items.0.quantity" in result.output

    def test_show_includes_timeline(self, run, container):
        order = _place_order(run, container)
        result = run("order", "show", "--user", CUSTOMER, "--id", order.id)
        assert result.exit_code == 0
        assert "Timeline:" in result.output
        assert "[>] Order Placed" in result.output

    def test_admin_update_then_track(self, run, container):
        order = _place_order(run, container)
        result = run(
            "order", "update", "--user", ADMIN, "--id", order.id, "--status", "shipped"
        )
        assert result.exit_code == 0, result.output
        assert container.orders.get_by_id(order.id).status == OrderStatus.SHIPPED

        result = run("order", "track", "--user", CUSTOMER, "--id", order.id)
        assert "Carrier: Express Delivery" in result.output

    def test_customer_cannot_update(self, run, container):
        order = _place_order(run, container)
        result = run(
            "order", "update", "--user", CUSTOMER, "--id", order.id, "--status", "shipped"
        )
        assert result.exit_code == 1
        assert "Forbidden" in result.output

    def test_cancel(self, run, container):
        order = _place_order(run, container)
        result = run("order", "cancel", "--user", CUSTOMER, "--id", order.id)
        assert result.exit_code == 0
        assert container.orders.get_by_id(order.id).status == OrderStatus.CANCELLED

        result = run("order", "cancel", "--user", CUSTOMER, "--id", order.id)
        assert result.exit_code == 1
        assert "cannot be cancelled" in result.output

    def test_other_users_order_is_not_found(self, run, container):
        order = _place_order(run, container)
        result = run("order", "show", "--user", ADMIN, "--id", order.id)
        assert result.exit_code == 1
        assert "Order not found" in result.output


class TestAccounts:

    def test_register_login_and_address(self, run, container):
        result = run(
            "user", "register",
            "--name", "Carol",
            "--email", "carol@example.com",
            "--password", "password123",
        )
        assert result.exit_code == 0, result.output
        carol = container.users.get_by_email("carol@example.com")

        result = run("user", "login", "--email", "carol@example.com", "--password", "password123")
        assert carol.id in result.output

        result = run(
            "address", "add",
            "--user", "carol@example.com",
            "--full-name", "Carol",
            "--street", "3 High St",
            "--city", "Ogdenville",
            "--postal-code", "12345",
            "--country", "US",
        )
        assert result.exit_code == 0
        assert "Ogdenville" in run("address", "list", "--user", "carol@example.com").output

    def test_register_short_password(self, run):
        result = run(
            "user", "register",
            "--name", "Carol",
            "--email", "carol@example.com",
            "--password", "short",
        )
        assert result.exit_code == 1
        assert "password" in result.output

    def test_wrong_password(self, run):
        result = run("user", "login", "--email", CUSTOMER, "--password", "nope")
        assert result.exit_code == 1
        assert "Invalid email or password" in result.output
