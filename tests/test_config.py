"""Tests for SelectorKitConfig defaults."""

import dataclasses

import pytest

from selectorkit import SelectorKitConfig


class TestSelectorKitConfig:
    def test_defaults(self):
        config = SelectorKitConfig()
        assert config.log_level == "WARNING"
        assert config.ticket_price == 25
        assert config.combinators == (" ", "+", "~", ">")

    def test_override(self):
        config = SelectorKitConfig(log_level="DEBUG", ticket_price=10)
        assert config.log_level == "DEBUG"
        assert config.ticket_price == 10

    def test_frozen(self):
        config = SelectorKitConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.ticket_price = 5  # type: ignore[misc]
