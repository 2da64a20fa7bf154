# threadsearch/engines/bracket.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from threadsearch.utils.errors import (
    DegenerateOracleError,
    NonMonotonicOracleError,
    UserInputError,
)
from threadsearch.utils.logger import logs

Sampler = Callable[[int], float]


@dataclass(frozen=True, slots=True)
class Bracket:
    """
    整数区间 [lower, upper]：

    - sample(lower) < goal
    - sample(upper) >= goal
    """

    lower: int
    lower_value: float
    upper: int
    upper_value: float

    @property
    def adjacent(self) -> bool:
        return self.upper == self.lower + 1


def _bisect(lower: int, upper: int, compare: Callable[[int], int]) -> int:
    """
    compare(mid) < 0 : mid 不满足
    compare(mid) == 0: mid 恰好命中，直接返回
    compare(mid) > 0 : mid 满足但可能不是最小
    """
    while lower < upper - 1:
        mid = (lower + upper) // 2
        if mid == lower:
            return upper

        c = compare(mid)
        if c == 0:
            return mid
        if c < 0:
            lower = mid
        else:
            upper = mid
    return upper


def minimal_int_satisfying(lower: int, upper: int, predicate: Callable[[int], bool]) -> int:
    """
    Smallest integer in (lower, upper] for which ``predicate`` holds.

    The caller guarantees predicate(lower) is False and predicate(upper) is
    True; neither endpoint is evaluated again. ``predicate`` must be monotone.
    """
    if upper <= lower:
        raise UserInputError(f"Invalid bracket: lower={lower} upper={upper}")

    return _bisect(lower, upper, lambda mid: 1 if predicate(mid) else -1)


def bisect_to_goal(
    sample: Sampler,
    goal: float,
    bracket: Bracket,
    *,
    check_monotonic: bool = True,
) -> int:
    """
    在 bracket 内二分，返回 sample(t) >= goal 的最小 t。

    - 恰好等于 goal 时立即返回
    - check_monotonic: 每个中点的采样值必须落在 [lower_value, upper_value] 内
    """
    bounds = [bracket.lower_value, bracket.upper_value]

    def compare(mid: int) -> int:
        value = sample(mid)
        lo_value, hi_value = bounds
        if check_monotonic and not (lo_value <= value <= hi_value):
            raise NonMonotonicOracleError(
                f"sample({mid})={value} outside [{lo_value}, {hi_value}]"
            )

        logs.debug(f"[Bisect] t={mid} value={value} goal={goal}")
        if value == goal:
            return 0
        if value < goal:
            bounds[0] = value
            return -1
        bounds[1] = value
        return 1

    return _bisect(bracket.lower, bracket.upper, compare)


def seek_upper(
    sample: Sampler,
    goal: float,
    lower: int,
    lower_value: float,
    start: int,
    *,
    multiplier: int = 2,
    max_steps: int = 64,
    check_monotonic: bool = True,
    ceiling: Optional[int] = None,
) -> Bracket:
    """
    从 start 开始按 multiplier 指数扩张上界，直到 sample(upper) >= goal。

    每次不满足时，当前 upper 成为新的 lower。
    - 无 ceiling：超过 max_steps 次扩张仍未命中 → DegenerateOracleError
    - 有 ceiling（已知必然满足的上界）：upper 截断到 ceiling，不受 max_steps 限制；
      ceiling 处仍不满足 → DegenerateOracleError
    """
    upper = max(start, lower + 1)
    step = 0

    while True:
        if ceiling is not None and upper >= ceiling:
            upper = max(ceiling, lower + 1)

        value = sample(upper)
        if check_monotonic and value < lower_value:
            raise NonMonotonicOracleError(
                f"sample({upper})={value} < sample({lower})={lower_value}"
            )

        logs.debug(f"[Seek] step={step} t={upper} value={value} goal={goal}")
        if value >= goal:
            return Bracket(lower, lower_value, upper, value)

        if ceiling is not None:
            if upper >= ceiling:
                raise DegenerateOracleError(
                    f"Oracle below goal={goal} at ceiling t={upper} (value={value})"
                )
        elif step >= max_steps:
            raise DegenerateOracleError(
                f"Oracle never reached goal={goal} within {max_steps} expansions (last t={upper})"
            )

        lower, lower_value = upper, value
        upper *= multiplier
        step += 1
