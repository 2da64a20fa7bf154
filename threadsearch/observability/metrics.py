#!filepath: threadsearch/observability/metrics.py
from dataclasses import dataclass, field
from typing import Any, Dict

from threadsearch.utils.logger import logs


@dataclass
class MetricRecorder:
    """
    记录搜索过程中的计数与结果：
    - incr(name)       计数器 +n（例如 grow.queries）
    - record(name, v)  覆盖式记录
    """

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def incr(self, name: str, n: int = 1):
        if not self.enabled:
            return
        self.metrics[name] = self.metrics.get(name, 0) + n

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.debug(f"[Metric] {name} = {value}")

    def get(self, name: str, default=None):
        return self.metrics.get(name, default)

    def reset(self):
        self.metrics.clear()
