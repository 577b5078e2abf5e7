"""Tests for exchange wiring and the token faucet."""

import pytest

from simpleswap.config import LedgerConfig
from simpleswap.errors import InvalidTokens
from simpleswap.exchange import Exchange, get_default_exchange
from tests.helpers import ALICE, E18, NOW, POOL, STRANGER_TOKEN, TOKEN_A, TOKEN_B


class TestExchange:
    """Tests for the Exchange bundle."""

    def test_components_share_custody_and_clock(self, exchange, clock):
        assert exchange.ledger.custody is exchange.custody
        assert exchange.swaps.ledger is exchange.ledger
        assert exchange.ledger.clock is clock
        assert exchange.custody.pool_address == POOL

    def test_default_deadline_uses_window(self, exchange, clock):
        assert exchange.default_deadline() == NOW + exchange.config.deadline_window
        clock.advance(10)
        assert exchange.default_deadline() == NOW + 10 + exchange.config.deadline_window

    def test_custom_window(self, clock):
        exchange = Exchange(LedgerConfig(deadline_window=0), clock)
        assert exchange.default_deadline() == NOW

    def test_faucet_mints_either_token(self, exchange):
        assert exchange.faucet(TOKEN_A, ALICE, 5 * E18) == 5 * E18
        assert exchange.faucet(TOKEN_B, ALICE, 7 * E18) == 7 * E18
        assert exchange.faucet(TOKEN_A, ALICE, E18) == 6 * E18

    def test_faucet_rejects_foreign_token(self, exchange):
        with pytest.raises(InvalidTokens):
            exchange.faucet(STRANGER_TOKEN, ALICE, E18)
        assert exchange.custody.balance_of(STRANGER_TOKEN, ALICE) == 0

    def test_default_exchange_is_cached(self, monkeypatch):
        monkeypatch.delenv("SIMPLESWAP_TOKEN_A", raising=False)
        get_default_exchange.cache_clear()
        try:
            assert get_default_exchange() is get_default_exchange()
        finally:
            get_default_exchange.cache_clear()
