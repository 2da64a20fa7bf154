#!filepath: threadsearch/__init__.py

from .utils.logger import Logging, logs
from .utils.table import Table
from .config.app_config import AppConfig
from .engines import (
    EffectOracle,
    SimpleOracle,
    ThreadCountEngine,
    minimal_int_satisfying,
    min_threads_for_grow,
    min_threads_for_hack,
    min_threads_for_weaken,
)

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging",
    "Table",
    "AppConfig",
    "EffectOracle", "SimpleOracle", "ThreadCountEngine",
    "minimal_int_satisfying",
    "min_threads_for_grow", "min_threads_for_weaken", "min_threads_for_hack",
]
