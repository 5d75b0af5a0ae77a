"""End-to-end tests for the click command line."""

from click.testing import CliRunner

from store.infrastructure.bootstrap import DEMO_ORDER_ID, demo_order
from store.infrastructure.cli.main import cli


def _run(*args: str):
    return CliRunner().invoke(cli, list(args))


class TestDemo:

    def test_demo_scenario(self):
        result = _run("demo")

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "STARTING STORE SYSTEM"
        assert "Total: $1249.98" in lines
        assert "Card payment 4400... Amount: $1249.98" in lines
        assert "Courier delivery of order ORDER-67" in lines
        assert lines.count("Email to client@gmail.com: Order ORDER-67 processed!") == 1
        assert lines.count("SMS to +77777777777: Order ORDER-67 processed!") == 1
        assert lines[-1] == "DONE! SOLID principles at work!"

    def test_demo_order_wiring(self):
        order = demo_order(echo=lambda line: None)
        assert order.order_id == DEMO_ORDER_ID
        assert str(order.total) == "$1249.98"
        assert len(order.notifiers) == 2
        assert str(order.delivery.calculate_cost(order)) == "$10.00"


class TestOrderProcess:

    def test_paypal_pickup(self):
        result = _run(
            "order", "process",
            "--id", "ORDER-7",
            "--products", "Book:12.50,Pen:1.50",
            "--payment", "paypal",
            "--account", "me@example.com",
            "--delivery", "pickup",
            "--sms", "+1555",
        )

        assert result.exit_code == 0, result.output
        assert "PayPal payment for me@example.com... Amount: $14.00" in result.output
        assert "Pick-up point delivery of order ORDER-7" in result.output
        assert "SMS to +1555: Order ORDER-7 processed!" in result.output
        assert "1 notification(s) sent" in result.output

    def test_without_strategies(self):
        result = _run("order", "process", "--id", "ORDER-8")
        assert result.exit_code == 0, result.output
        assert "Total: $0.00" in result.output

    def test_payment_without_account_rejected(self):
        result = _run("order", "process", "--id", "X", "--payment", "card")
        assert result.exit_code == 1
        assert "--payment requires --account" in result.output

    def test_negative_price_reported(self):
        result = _run("order", "process", "--id", "X", "--products", "Book:-3")
        assert result.exit_code == 1
        assert "cannot be negative" in result.output

    def test_bad_product_format(self):
        result = _run("order", "process", "--id", "X", "--products", "Book")
        assert result.exit_code == 2
        assert "Expected 'Name:Price'" in result.output


class TestOrderQuote:

    def test_quote_with_discount(self):
        result = _run(
            "order", "quote", "--id", "Q-1",
            "--products", "Widget:150,Gadget:50",
            "--discount", "15",
        )
        assert result.exit_code == 0, result.output
        assert "Discount 15%: -$30.00" in result.output
        assert "$180.00" in result.output

    def test_bad_discount_reported(self):
        result = _run("order", "quote", "--id", "Q-1", "--products", "W:1", "--discount", "150")
        assert result.exit_code == 1
        assert "between 0 and 100" in result.output


    def test_infinite_price_reported(self):
        result = _run("order", "quote", "--id", "Q", "--products", "W:inf", "--discount", "10")
        assert result.exit_code == 1
        assert "Error: Money amount must be finite" in result.output

    def test_nan_discount_reported(self):
        result = _run("order", "quote", "--id", "Q", "--products", "W:10", "--discount", "nan")
        assert result.exit_code == 1
        assert "Error: Discount percent must be finite" in result.output


class TestNotify:

    def test_sms_channel(self):
        result = _run("notify", "--channel", "sms", "Your parcel is ready")
        assert result.exit_code == 0
        assert result.output.strip() == "SMS sent: Your parcel is ready"

    def test_blank_message_reported(self):
        result = _run("notify", " ")
        assert result.exit_code == 1
        assert "must not be empty" in result.output


class TestPayroll:

    def test_table(self):
        result = _run(
            "payroll",
            "--employee", "Alice:permanent:1000",
            "--employee", "Carol:intern:500",
        )
        assert result.exit_code == 0, result.output
        assert "$1200.00" in result.output
        assert "$400.00" in result.output
        assert "$1600.00" in result.output

    def test_unknown_kind_reported(self):
        result = _run("payroll", "--employee", "Eve:boss:10")
        assert result.exit_code == 1
        assert "Unknown employee kind" in result.output

    def test_bad_format(self):
        result = _run("payroll", "--employee", "Eve")
        assert result.exit_code == 2
        assert "Name:Kind:BaseSalary" in result.output
