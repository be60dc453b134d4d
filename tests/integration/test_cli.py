"""
Integration tests for ``python -m sales_engine``.
"""
import logging
import pytest

from sales_engine.__main__ import main


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sales_dir(tmp_path):
    (tmp_path / "merchants.csv").write_text(
        "id,name,created_at,updated_at\n"
        "1,Shopin1901,2010-12-10,2011-12-04\n"
        "2,Candisart,2009-05-30,2010-08-29\n"
    )
    (tmp_path / "items.csv").write_text(
        "id,name,description,unit_price,merchant_id,created_at,updated_at\n"
        "1,Pencil,,1000,1,2016-01-11,2016-01-11\n"
        "2,Pen,,3000,2,2016-01-11,2016-01-11\n"
    )
    (tmp_path / "invoices.csv").write_text(
        "id,customer_id,merchant_id,status,created_at,updated_at\n"
        "1,1,2,shipped,2012-11-23,2012-11-23\n"
    )
    (tmp_path / "invoice_items.csv").write_text(
        "id,item_id,invoice_id,quantity,unit_price,created_at,updated_at\n"
        "1,2,1,4,3000,2012-11-23,2012-11-23\n"
    )
    (tmp_path / "transactions.csv").write_text(
        "id,invoice_id,credit_card_number,credit_card_expiration_date,result,created_at,updated_at\n"
        "1,1,4068631943231473,0217,success,2012-11-23,2012-11-23\n"
    )
    return tmp_path


class TestMain:
    """Tests for the summary command."""

    def test_prints_summary(self, sales_dir, capsys, restore_root_logger):
        assert main(["--data-dir", str(sales_dir), "--top", "1", "--log-level", "warning"]) == 0

        out = capsys.readouterr().out
        assert "Merchants: 2  Items: 2  Invoices: 1" in out
        assert "Average item price: 20.00" in out
        assert "shipped: 100.00%" in out
        assert "Candisart" in out
        assert "Shopin1901" not in out.split("Top revenue earners:")[1]

    def test_log_level_applied(self, sales_dir, restore_root_logger):
        main(["--data-dir", str(sales_dir), "--log-level", "ERROR"])
        assert logging.getLogger().level == logging.ERROR

    def test_bad_data_exits_nonzero(self, tmp_path, capsys, restore_root_logger):
        (tmp_path / "items.csv").write_text(
            "id,name,description,unit_price,merchant_id,created_at,updated_at\n"
            "1,Pencil,,cheap,1,2016-01-11,2016-01-11\n"
        )
        assert main(["--data-dir", str(tmp_path)]) == 1
        assert "Summary failed" in capsys.readouterr().err

    def test_negative_top(self, sales_dir, restore_root_logger):
        assert main(["--data-dir", str(sales_dir), "--top", "-1"]) == 1

    def test_unknown_log_level(self):
        with pytest.raises(SystemExit):
            main(["--log-level", "LOUD"])
