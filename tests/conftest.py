# tests/conftest.py
from __future__ import annotations

from typing import Callable, Optional

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


class FakeOracle:
    """
    可注入任意函数的 oracle，并记录查询次数
    """

    def __init__(
        self,
        grow: Optional[Callable[[int], float]] = None,
        weaken: Optional[Callable[[int], float]] = None,
        hack: float = 0.0,
    ):
        self.grow = grow or (lambda t: 1.0)
        self.weaken = weaken or (lambda t: 0.0)
        self.hack = hack
        self.calls = {"grow": 0, "weaken": 0, "hack": 0}

    def grow_percent(self, server, threads, player, cores):
        self.calls["grow"] += 1
        return self.grow(threads)

    def weaken_analyze(self, threads, cores):
        self.calls["weaken"] += 1
        return self.weaken(threads)

    def hack_percent(self, server, player):
        self.calls["hack"] += 1
        return self.hack


@pytest.fixture
def linear_grow_oracle():
    """grow_percent = 1 + 0.01 * threads"""
    return FakeOracle(grow=lambda t: 1 + 0.01 * t)


@pytest.fixture
def linear_weaken_oracle():
    """weaken_analyze = 0.05 * threads"""
    return FakeOracle(weaken=lambda t: 0.05 * t)


@pytest.fixture
def hack_oracle():
    return FakeOracle(hack=0.1)


@pytest.fixture
def fake_oracle():
    return FakeOracle


def brute_min(predicate, limit: int = 1_000_000) -> int:
    for t in range(limit):
        if predicate(t):
            return t
    raise AssertionError("no t satisfies predicate")


@pytest.fixture
def brute():
    """线性扫描求最小满足值，作为对照"""
    return brute_min
