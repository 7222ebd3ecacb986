"""
Tests for the fee split preview script

Author: TM3
Date: 2025-10-17
"""
import logging

from scripts.fee_split import main


def test_prints_per_unit_fees(capsys):
    exit_code = main(["--ship", "5.00", "--article", "15.00", "--fee", "2.00", "--quantity", "2"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Ship fee per unit:    0.25" in out
    assert "Article fee per unit: 0.75" in out
    assert "Total per unit:       1.00" in out


def test_invalid_quantity_returns_error(caplog):
    with caplog.at_level(logging.ERROR):
        exit_code = main(["--ship", "5", "--article", "15", "--fee", "2", "--quantity", "0"])

    assert exit_code == 1
    assert "Quantity must be positive" in caplog.text
