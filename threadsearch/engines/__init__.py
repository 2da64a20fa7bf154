from .bracket import Bracket, bisect_to_goal, minimal_int_satisfying, seek_upper
from .oracle import EffectOracle, SimpleOracle
from .threadcounts import (
    ThreadCountEngine,
    compute_grow,
    compute_hack,
    min_threads_for_grow,
    min_threads_for_hack,
    min_threads_for_weaken,
)

__all__ = [
    "Bracket", "bisect_to_goal", "minimal_int_satisfying", "seek_upper",
    "EffectOracle", "SimpleOracle",
    "ThreadCountEngine",
    "compute_grow", "compute_hack",
    "min_threads_for_grow", "min_threads_for_weaken", "min_threads_for_hack",
]
