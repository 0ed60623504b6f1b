"""Unit tests for the StockMutator domain service."""

import logging

import pytest

from pims.domain.model.transaction import TransactionType
from pims.domain.model.value_objects import Quantity
from pims.domain.service.stock_mutator import StockMutator
from tests.fakes import make_product


class TestIncoming:

    @pytest.mark.parametrize("before,qty", [(0, 1), (500, 200), (7, 993)])
    def test_adds_quantity(self, before, qty):
        p = make_product(quantity=before)
        StockMutator().apply(p, TransactionType.INCOMING, Quantity(qty))
        assert p.quantity == before + qty


class TestOutgoing:

    def test_subtracts_quantity(self):
        p = make_product(quantity=500)
        StockMutator().apply(p, TransactionType.OUTGOING, Quantity(50))
        assert p.quantity == 450

    def test_exact_stock_reaches_zero(self):
        p = make_product(quantity=50)
        StockMutator().apply(p, TransactionType.OUTGOING, Quantity(50))
        assert p.quantity == 0

    def test_oversell_floors_at_zero(self):
        p = make_product(quantity=500)
        StockMutator().apply(p, TransactionType.OUTGOING, Quantity(600))
        assert p.quantity == 0

    def test_oversell_logs_warning(self, caplog):
        p = make_product(quantity=500)
        with caplog.at_level(logging.WARNING, logger="pims.domain.service.stock_mutator"):
            StockMutator().apply(p, TransactionType.OUTGOING, Quantity(600))
        assert "exceeds stock on hand" in caplog.text
        assert "100 units unaccounted" in caplog.text

    def test_normal_sale_does_not_warn(self, caplog):
        p = make_product(quantity=500)
        with caplog.at_level(logging.WARNING, logger="pims.domain.service.stock_mutator"):
            StockMutator().apply(p, TransactionType.OUTGOING, Quantity(10))
        assert caplog.records == []
