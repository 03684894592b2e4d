"""Shared fixtures for the msprefixspan tests."""

from __future__ import annotations

import pytest

from msprefixspan import SupportTable, Transaction


def seq(*sets):
    """Build a transaction from itemsets written as strings, seq("ab", "c") is <{a, b}{c}>."""
    return Transaction([list(s) for s in sets])


@pytest.fixture
def scenario_pool():
    return [seq("ab"), seq("a", "b"), seq("ab", "c"), seq("b")]


@pytest.fixture
def scenario_support():
    return SupportTable({"a": 0.5, "b": 0.5, "c": 0.5}, sdc=1.0)


@pytest.fixture
def chain_pool():
    return [seq("a", "b", "c"), seq("a", "b", "c"), seq("a", "b"), seq("b", "c")]
