# threadsearch/engines/threadcounts.py
from __future__ import annotations

import math
from typing import Any, Optional

from threadsearch.config.search_config import SearchConfig
from threadsearch.engines.bracket import Bracket, bisect_to_goal, seek_upper
from threadsearch.engines.oracle import EffectOracle
from threadsearch.observability.metrics import MetricRecorder
from threadsearch.utils.errors import (
    DegenerateOracleError,
    NonMonotonicOracleError,
    OracleContractError,
    UserInputError,
)
from threadsearch.utils.logger import logs


class ThreadCountEngine:
    """
    ThreadCountEngine

    Contract:
    - Input:
        from / to quantities : finite float >= 0
        cores                : int >= 1
        server / player      : opaque, passed to the oracle unchanged
    - Output:
        minimal int thread count >= 0 (0 = goal already met)
    - No IO
    - Deterministic for a deterministic oracle
    - O(log(range)) oracle queries per call
    """

    def __init__(
        self,
        oracle: EffectOracle,
        config: Optional[SearchConfig] = None,
        metrics: Optional[MetricRecorder] = None,
    ):
        self.oracle = oracle
        self.config = config or SearchConfig()
        self.metrics = metrics or MetricRecorder(enabled=False)

    # ------------------------------------------------------------------
    # Forward simulation
    # ------------------------------------------------------------------

    def compute_grow(
        self,
        from_money: float,
        server: Any,
        threads: int,
        player: Any,
        cores: int = 1,
    ) -> float:
        """
        Money after a grow with ``threads`` threads (NOT limited by max money).
        """
        self._check_quantity("from_money", from_money)
        self._check_threads(threads)
        self._check_cores(cores)
        return (from_money + threads) * self._grow_percent(server, threads, player, cores)

    def compute_hack(
        self,
        from_money: float,
        server: Any,
        threads: int,
        player: Any,
    ) -> float:
        """
        Money taken by ``threads`` hack threads.

        The per-thread amount is floored before scaling, so
        min_threads_for_hack inverts exactly this rule.
        """
        self._check_quantity("from_money", from_money)
        self._check_threads(threads)
        return math.floor(from_money * self._hack_percent(server, player)) * threads

    # ------------------------------------------------------------------
    # Grow
    # ------------------------------------------------------------------

    def min_threads_for_grow(
        self,
        from_money: float,
        to_money: float,
        server: Any,
        player: Any,
        cores: int = 1,
    ) -> int:
        """
        Smallest t >= 0 with (from_money + t) * grow_percent(t) >= to_money.

        1. 已满足 → 0，不查询 oracle
        2. 1 线程满足 → 1
        3. 用单线程增长率做对数估计作为上界种子（不足时指数扩张）
        4. 在 (1, upper] 内二分
        """
        self._check_quantity("from_money", from_money)
        self._check_quantity("to_money", to_money)
        self._check_cores(cores)

        if from_money >= to_money:
            return self._done("grow", 0)

        rate_one = self._grow_percent(server, 1, player, cores)
        money_one = (from_money + 1) * rate_one
        if money_one >= to_money:
            return self._done("grow", 1)

        def sample(threads: int) -> float:
            return self.compute_grow(from_money, server, threads, player, cores)

        linear = self._grow_linear_bound(from_money, to_money)
        estimate = self._grow_estimate(from_money, to_money, rate_one)
        bracket = self._seek(sample, to_money, 1, money_one, estimate, ceiling=linear)
        if bracket.adjacent:
            return self._done("grow", bracket.upper)

        threads = bisect_to_goal(
            sample, to_money, bracket, check_monotonic=self.config.validate_monotonic
        )
        return self._done("grow", threads)

    @staticmethod
    def _grow_linear_bound(from_money: float, to_money: float) -> int:
        # (from + t) * rate >= from + t, so this always suffices
        return max(2, math.ceil(to_money - from_money))

    @classmethod
    def _grow_estimate(cls, from_money: float, to_money: float, rate_one: float) -> int:
        linear = cls._grow_linear_bound(from_money, to_money)
        if rate_one <= 1:
            return linear

        # Over-estimate in the usual case; we know it's at least 2 threads
        estimate = math.ceil(math.log(to_money / (from_money + 2)) / math.log(rate_one))
        return min(linear, max(2, estimate))

    # ------------------------------------------------------------------
    # Weaken
    # ------------------------------------------------------------------

    def min_threads_for_weaken(
        self,
        from_security: float,
        to_security: float,
        cores: int = 1,
    ) -> int:
        """
        Smallest t >= 0 with weaken_analyze(t) >= max(0, from - to).

        No closed form: linear seed, exponential doubling until bracketed,
        a cheap check of ``upper - 1``, then bisection.
        """
        self._check_quantity("from_security", from_security)
        self._check_quantity("to_security", to_security)
        self._check_cores(cores)

        to_weaken = max(0.0, from_security - to_security)
        if to_weaken == 0:
            return self._done("weaken", 0)

        def sample(threads: int) -> float:
            return self._weaken_analyze(threads, cores)

        weaken_one = sample(1)
        if weaken_one <= 0:
            raise DegenerateOracleError(f"weaken_analyze(1, {cores}) = {weaken_one}")
        if weaken_one >= to_weaken:
            return self._done("weaken", 1)

        seed = to_weaken / weaken_one
        if not math.isfinite(seed):
            raise DegenerateOracleError(
                f"weaken_analyze(1, {cores}) = {weaken_one} is too small to seed the search"
            )

        bracket = self._seek(sample, to_weaken, 1, weaken_one, math.ceil(seed))
        if bracket.upper_value == to_weaken or bracket.adjacent:
            return self._done("weaken", bracket.upper)

        # In theory the linear seed already guessed this
        pred = bracket.upper - 1
        pred_value = sample(pred)
        if self.config.validate_monotonic:
            self._check_between(pred, pred_value, bracket)
        if pred_value < to_weaken:
            return self._done("weaken", bracket.upper)
        if pred_value == to_weaken:
            return self._done("weaken", pred)

        bracket = Bracket(bracket.lower, bracket.lower_value, pred, pred_value)
        if bracket.adjacent:
            return self._done("weaken", bracket.upper)

        threads = bisect_to_goal(
            sample, to_weaken, bracket, check_monotonic=self.config.validate_monotonic
        )
        return self._done("weaken", threads)

    # ------------------------------------------------------------------
    # Hack
    # ------------------------------------------------------------------

    def min_threads_for_hack(
        self,
        from_money: float,
        to_money: float,
        server: Any,
        player: Any,
    ) -> int:
        """
        Closed form: ceil(to_hack / floor(from_money * hack_percent)).
        """
        self._check_quantity("from_money", from_money)
        self._check_quantity("to_money", to_money)

        to_hack = max(0.0, from_money - to_money)
        if to_hack == 0:
            return self._done("hack", 0)

        per_thread = math.floor(from_money * self._hack_percent(server, player))
        if per_thread <= 0:
            raise DegenerateOracleError(
                f"Hack yields less than one unit per thread at money={from_money}"
            )
        return self._done("hack", math.ceil(to_hack / per_thread))

    # ------------------------------------------------------------------
    # Oracle access & validation
    # ------------------------------------------------------------------

    def _grow_percent(self, server: Any, threads: int, player: Any, cores: int) -> float:
        self.metrics.incr("grow.queries")
        value = self.oracle.grow_percent(server, threads, player, cores)
        if not math.isfinite(value) or value < 1:
            raise OracleContractError(f"grow_percent(threads={threads}) = {value}, expected >= 1")
        return value

    def _weaken_analyze(self, threads: int, cores: int) -> float:
        self.metrics.incr("weaken.queries")
        value = self.oracle.weaken_analyze(threads, cores)
        if not math.isfinite(value) or value < 0:
            raise OracleContractError(f"weaken_analyze(threads={threads}) = {value}, expected >= 0")
        return value

    def _hack_percent(self, server: Any, player: Any) -> float:
        self.metrics.incr("hack.queries")
        value = self.oracle.hack_percent(server, player)
        if not 0 <= value <= 1:
            raise OracleContractError(f"hack_percent = {value}, expected within [0, 1]")
        return value

    def _seek(
        self,
        sample,
        goal: float,
        lower: int,
        lower_value: float,
        start: int,
        ceiling: Optional[int] = None,
    ) -> Bracket:
        return seek_upper(
            sample,
            goal,
            lower,
            lower_value,
            start,
            multiplier=self.config.seek_multiplier,
            max_steps=self.config.max_seek_steps,
            check_monotonic=self.config.validate_monotonic,
            ceiling=ceiling,
        )

    def _done(self, op: str, threads: int) -> int:
        self.metrics.record(f"{op}.threads", threads)
        logs.debug(f"[{op}] -> {threads} threads")
        return threads

    @staticmethod
    def _check_between(threads: int, value: float, bracket: Bracket) -> None:
        if not bracket.lower_value <= value <= bracket.upper_value:
            raise NonMonotonicOracleError(
                f"sample({threads})={value} outside "
                f"[{bracket.lower_value}, {bracket.upper_value}]"
            )

    @staticmethod
    def _check_quantity(name: str, value: float) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise UserInputError(f"{name} must be a number, got {value!r}")
        if not math.isfinite(value) or value < 0:
            raise UserInputError(f"{name} must be finite and >= 0, got {value}")

    @staticmethod
    def _check_cores(cores: int) -> None:
        if isinstance(cores, bool) or not isinstance(cores, int) or cores < 1:
            raise UserInputError(f"cores must be an int >= 1, got {cores!r}")

    @staticmethod
    def _check_threads(threads: int) -> None:
        if isinstance(threads, bool) or not isinstance(threads, int) or threads < 0:
            raise UserInputError(f"threads must be an int >= 0, got {threads!r}")


# ----------------------------------------------------------------------
# Function-style API
# ----------------------------------------------------------------------

def compute_grow(oracle: EffectOracle, from_money, server, threads, player, cores=1) -> float:
    return ThreadCountEngine(oracle).compute_grow(from_money, server, threads, player, cores)


def compute_hack(oracle: EffectOracle, from_money, server, threads, player) -> float:
    return ThreadCountEngine(oracle).compute_hack(from_money, server, threads, player)


def min_threads_for_grow(oracle: EffectOracle, from_money, to_money, server, player, cores=1) -> int:
    return ThreadCountEngine(oracle).min_threads_for_grow(from_money, to_money, server, player, cores)


def min_threads_for_weaken(oracle: EffectOracle, from_security, to_security, cores=1) -> int:
    return ThreadCountEngine(oracle).min_threads_for_weaken(from_security, to_security, cores)


def min_threads_for_hack(oracle: EffectOracle, from_money, to_money, server, player) -> int:
    return ThreadCountEngine(oracle).min_threads_for_hack(from_money, to_money, server, player)
