"""End-to-end tests of the ``ams`` command line against a temp data dir."""

import pytest
from click.testing import CliRunner

from ams.infrastructure.cli import main


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("AMS_DATA_DIR", str(tmp_path))
    monkeypatch.setattr(main, "configure_logging", lambda level: None)
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(main.cli, list(args))

    return invoke


def _listed_product(run):
    run("user", "add", "--username", "meera", "--name", "Meera",
        "--email", "meera@example.com", "--role", "artisan")
    run("user", "add", "--username", "ravi", "--name", "Ravi",
        "--email", "ravi@example.com", "--role", "customer")
    run("product", "add", "--owner", "1", "--name", "Clay Vase", "--category", "pottery",
        "--material", "clay", "--price", "200", "--quantity", "10")
    run("product", "approve", "--id", "1")


class TestUserAndProductCommands:

    def test_register_user(self, run):
        result = run("user", "add", "--username", "meera", "--name", "Meera",
                     "--email", "meera@example.com", "--role", "artisan")
        assert result.exit_code == 0
        assert "User #1 'meera' registered as artisan" in result.output

    def test_add_product_is_pending(self, run):
        run("user", "add", "--username", "meera", "--name", "Meera",
            "--email", "meera@example.com", "--role", "artisan")
        result = run("product", "add", "--owner", "1", "--name", "Clay Vase",
                     "--category", "pottery", "--material", "clay",
                     "--price", "200", "--quantity", "10")

        assert result.exit_code == 0
        assert "sells for ₹180.00" in result.output
        assert "No products found." in run("product", "list").output

    def test_approved_product_is_listed(self, run):
        _listed_product(run)
        result = run("product", "list", "--category", "pottery")
        assert "Clay Vase" in result.output
        assert "Page 1/1 (1 products)" in result.output

    def test_restock_to_zero_fails(self, run):
        _listed_product(run)
        result = run("product", "restock", "--id", "1", "--quantity", "0")
        assert result.exit_code == 1
        assert "cannot be zero" in result.output


class TestCheckoutCommands:

    def test_cart_then_checkout(self, run):
        _listed_product(run)
        assert "Product added to cart!" in run(
            "cart", "add", "--user", "2", "--product", "1", "--quantity", "2"
        ).output
        assert "₹360.00" in run("cart", "show", "--user", "2").output

        result = run("order", "place", "--user", "2")

        assert result.exit_code == 0
        assert "Order placed successfully!" in result.output
        assert "total ₹428.00" in result.output
        assert "Cart is empty." in run("cart", "show", "--user", "2").output

    def test_second_checkout_fails(self, run):
        _listed_product(run)
        run("cart", "add", "--user", "2", "--product", "1")
        run("order", "place", "--user", "2")

        result = run("order", "place", "--user", "2")

        assert result.exit_code == 1
        assert "Error placing order: Cart is empty!" in result.output

    def test_order_lifecycle(self, run):
        _listed_product(run)
        run("user", "add", "--username", "dev", "--name", "Dev",
            "--email", "dev@example.com", "--role", "delivery")
        run("cart", "add", "--user", "2", "--product", "1")
        run("order", "place", "--user", "2")

        assert "Clay Vase" in run("order", "show", "--id", "1").output
        assert run("delivery", "accept", "--id", "1", "--courier", "3").exit_code == 0
        assert "Order #1 delivered." in run(
            "delivery", "complete", "--id", "1", "--courier", "3"
        ).output
        assert "delivered" in run("order", "list", "--user", "2").output

    def test_sales_report(self, run):
        _listed_product(run)
        run("cart", "add", "--user", "2", "--product", "1")
        run("order", "place", "--user", "2")

        result = run("report", "sales")
        assert result.exit_code == 0
        assert "239.00" in result.output

    def test_unknown_order(self, run):
        result = run("order", "show", "--id", "5")
        assert result.exit_code == 1
        assert "Order #5 not found" in result.output


class TestWorkshopTicketAndRequestCommands:

    def test_workshop_flow(self, run):
        _listed_product(run)
        booked = run("workshop", "book", "--user", "2", "--title", "Wheel basics",
                     "--date", "2026-12-05", "--time", "15:00")
        assert booked.exit_code == 0
        assert "Workshop #1 booked for 2026-12-05 15:00." in booked.output

        accepted = run("workshop", "accept", "--id", "1", "--artisan", "1")
        assert "Workshop accepted successfully!" in accepted.output
        assert "No workshops found." in run("workshop", "list", "--status", "pending").output

        run("user", "retire", "--id", "1")
        assert "Wheel basics" in run("workshop", "list", "--status", "pending").output

    def test_ticket_flow(self, run):
        _listed_product(run)
        opened = run("ticket", "raise", "--user", "2", "--subject", "Late parcel",
                     "--category", "delivery", "--description", "Not here yet")
        assert "Ticket #1 opened." in opened.output

        moved = run("ticket", "status", "--id", "1", "--to", "closed")
        assert "Ticket #1 is now closed." in moved.output
        assert "Ticket removed successfully!" in run("ticket", "remove", "--id", "1").output
        assert "No tickets found." in run("ticket", "list").output

    def test_request_flow(self, run):
        _listed_product(run)
        submitted = run("request", "submit", "--user", "2", "--title", "Jhula",
                        "--type", "woodwork", "--budget", "12000",
                        "--required-by", "2027-01-15")
        assert "Request #1 submitted with budget ₹12000.00." in submitted.output

        refused = run("request", "approve", "--id", "1", "--artisan", "2")
        assert refused.exit_code == 1
        assert "not an artisan" in refused.output

        run("request", "approve", "--id", "1", "--artisan", "1")
        assert "Jhula" in run("request", "list", "--accepted").output
        assert "No requests found." in run("request", "list", "--open").output
