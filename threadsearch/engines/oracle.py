# threadsearch/engines/oracle.py
from __future__ import annotations

import math
from typing import Any, Protocol, runtime_checkable

from threadsearch.config.oracle_config import OracleConfig


@runtime_checkable
class EffectOracle(Protocol):
    """
    Effect oracle contract (supplied by the caller).

    Contract:
    - grow_percent : growth multiplier >= 1, non-decreasing in threads
    - weaken_analyze : security reduction >= 0, non-decreasing in threads
    - hack_percent : per-thread fraction in [0, 1], independent of threads
    - Deterministic for a fixed input tuple
    - server / player are opaque to the engine
    """

    def grow_percent(self, server: Any, threads: int, player: Any, cores: int) -> float:
        ...

    def weaken_analyze(self, threads: int, cores: int) -> float:
        ...

    def hack_percent(self, server: Any, player: Any) -> float:
        ...


def core_bonus(cores: int) -> float:
    return 1 + (cores - 1) / 16


class SimpleOracle:
    """
    确定性、单调的参考 oracle（CLI 与测试使用）。

    - grow   : min(max_grow_percent, base_grow_rate ** (threads * core_bonus))
    - weaken : weaken_per_thread * threads * core_bonus
    - hack   : 常数 hack_fraction
    server / player 被忽略。
    """

    def __init__(self, cfg: OracleConfig | None = None):
        self.cfg = cfg or OracleConfig()

    def grow_percent(self, server: Any, threads: int, player: Any, cores: int = 1) -> float:
        # 对数空间比较，先截断再取指数，避免大线程数时溢出
        exponent = threads * core_bonus(cores) * math.log(self.cfg.base_grow_rate)
        if exponent >= math.log(self.cfg.max_grow_percent):
            return self.cfg.max_grow_percent
        return math.exp(exponent)

    def weaken_analyze(self, threads: int, cores: int = 1) -> float:
        return self.cfg.weaken_per_thread * threads * core_bonus(cores)

    def hack_percent(self, server: Any, player: Any) -> float:
        return self.cfg.hack_fraction
