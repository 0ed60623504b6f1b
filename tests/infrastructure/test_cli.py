"""Smoke tests for the click command line, run against the demo data."""

import pytest
from click.testing import CliRunner

from pims.infrastructure import bootstrap
from pims.infrastructure.cli.main import cli

AS_OF = ["--as-of", "2025-06-15"]


@pytest.fixture(autouse=True)
def fresh_stores(monkeypatch, tmp_path):
    monkeypatch.setenv("PIMS_SEED_DEMO_DATA", "1")
    monkeypatch.setenv("PIMS_EXPORT_DIR", str(tmp_path))
    bootstrap.reset()
    yield
    bootstrap.reset()


@pytest.fixture
def runner():
    return CliRunner()


class TestProductCommands:

    def test_list(self, runner):
        result = runner.invoke(cli, ["product", "list", *AS_OF])
        assert result.exit_code == 0
        assert "Showing 9 of 9 products" in result.output

    def test_list_search(self, runner):
        result = runner.invoke(cli, ["product", "list", "--search", "natura", *AS_OF])
        assert "Showing 2 of 9 products" in result.output

    def test_add_then_list(self, runner):
        result = runner.invoke(cli, [
            "product", "add", "--name", "Zinc 20mg", "--category", "supplement",
            "--type", "Tablet", "--quantity", "60", "--unit", "tablets",
            "--min-stock", "20", "--price", "12000", "--supplier", "PT Natura",
            "--expiry", "2027-01-31", "--batch", "ZINC-001", "--storage", "Room Temperature",
        ])
        assert result.exit_code == 0, result.output
        assert "Product #10 'Zinc 20mg' added at Rp 12.000" in result.output

    def test_add_negative_quantity_fails(self, runner):
        result = runner.invoke(cli, [
            "product", "add", "--name", "Zinc 20mg", "--category", "supplement",
            "--type", "Tablet", "--quantity", "-1", "--unit", "tablets",
            "--min-stock", "20", "--price", "12000", "--supplier", "PT Natura",
            "--expiry", "2027-01-31", "--batch", "ZINC-001", "--storage", "Room Temperature",
        ])
        assert result.exit_code == 1
        assert "cannot be negative" in result.output

    def test_update_unknown_product(self, runner):
        result = runner.invoke(cli, ["product", "update", "--id", "99", "--price", "1"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestTransactionCommands:

    def test_record_outgoing(self, runner):
        result = runner.invoke(cli, [
            "transaction", "record", "--product-id", "1", "--type", "outgoing",
            "--quantity", "50", "--reference", "INV-1", "--customer", "Walk-in Customer",
        ])
        assert result.exit_code == 0, result.output
        assert "TRX-004 recorded" in result.output
        assert "Total: Rp 250.000" in result.output
        assert "Stock now: 450 tablets" in result.output

    def test_record_unknown_product(self, runner):
        result = runner.invoke(cli, [
            "transaction", "record", "--product-id", "99", "--type", "incoming", "--quantity", "5",
        ])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_list(self, runner):
        result = runner.invoke(cli, ["transaction", "list"])
        assert result.exit_code == 0
        assert "Incoming: 1 (Rp 1.000.000)" in result.output
        assert "TRX-003" in result.output


class TestOverviewCommands:

    def test_dashboard(self, runner):
        result = runner.invoke(cli, ["dashboard", *AS_OF])
        assert result.exit_code == 0
        assert "Total products: 9" in result.output

    def test_alerts(self, runner):
        result = runner.invoke(cli, ["alerts", *AS_OF])
        assert result.exit_code == 0
        assert "Low stock (4)" in result.output
        assert "Expired (1)" in result.output
        assert "Expiring soon (1)" in result.output


class TestReportCommands:

    def test_show(self, runner):
        result = runner.invoke(cli, ["report", "show", "--kind", "lowstock", *AS_OF])
        assert result.exit_code == 0
        assert "Low Stock Report" in result.output
        assert "total reorder cost: Rp 3.725.000" in result.output

    def test_export_to_default_dir(self, runner, tmp_path):
        result = runner.invoke(cli, ["report", "export", "--kind", "stock", *AS_OF])
        assert result.exit_code == 0, result.output
        content = (tmp_path / "stock_report.csv").read_text(encoding="utf-8")
        assert content.splitlines()[1].startswith('"Paracetamol 500mg","medicine","Tablet",500,')

    def test_export_to_explicit_path(self, runner, tmp_path):
        target = tmp_path / "tx.csv"
        result = runner.invoke(cli, [
            "report", "export", "--kind", "transactions", "--output", str(target),
        ])
        assert result.exit_code == 0
        assert len(target.read_text(encoding="utf-8").splitlines()) == 4
