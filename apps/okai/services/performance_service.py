"""
Simulated system metrics for the performance dashboard.

Nothing here is measured: every snapshot moves each metric by a small random
step, the same way the dashboard has always animated its numbers.
"""
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional
import random
import threading

from apps.okai.schemas.performance import MetricReading, PerformanceSnapshot, RunningApp
from common.utils.clock import utcnow

HISTORY_LENGTH = 7
MAX_STEP = 10.0


@dataclass
class SimulatedMetric:
    name: str
    value: float
    unit: str
    low: float
    high: float
    warning_above: Optional[float] = None
    critical_above: Optional[float] = None
    trend: str = "stable"
    history: List[float] = field(default_factory=list)

    def __post_init__(self):
        if not self.history:
            self.history = [self.value] * HISTORY_LENGTH

    @property
    def status(self) -> str:
        if self.critical_above is not None and self.value > self.critical_above:
            return "critical"
        if self.warning_above is not None and self.value > self.warning_above:
            return "warning"
        return "good"

    def step(self, rng: random.Random) -> None:
        variation = (rng.random() - 0.5) * MAX_STEP
        new_value = round(min(self.high, max(self.low, self.value + variation)), 1)

        if new_value > self.value:
            self.trend = "up"
        elif new_value < self.value:
            self.trend = "down"
        else:
            self.trend = "stable"

        self.value = new_value
        self.history = self.history[1:] + [new_value]

    def reading(self) -> MetricReading:
        return MetricReading(
            name=self.name,
            value=self.value,
            unit=self.unit,
            status=self.status,
            trend=self.trend,
            history=list(self.history)
        )


def default_metrics() -> List[SimulatedMetric]:
    return [
        SimulatedMetric("CPU Usage", 45.0, "%", 0, 100, warning_above=60, critical_above=80),
        SimulatedMetric("Memory Usage", 62.0, "%", 0, 100, warning_above=60, critical_above=80),
        SimulatedMetric("Response Time", 125.0, "ms", 50, 500, warning_above=200, critical_above=300),
        SimulatedMetric("Active Connections", 234.0, "connections", 100, 1000),
    ]


RUNNING_APPS = [
    RunningApp(id="1", name="AI Chat Service", cpu=15, memory=25, status="running"),
    RunningApp(id="2", name="Image Generator", cpu=35, memory=45, status="busy"),
    RunningApp(id="3", name="Document Scanner", cpu=8, memory=12, status="idle"),
    RunningApp(id="4", name="Video Generator", cpu=65, memory=78, status="busy"),
    RunningApp(id="5", name="Web Search API", cpu=12, memory=18, status="running"),
    RunningApp(id="6", name="Database Engine", cpu=22, memory=35, status="running"),
    RunningApp(id="7", name="File Storage", cpu=5, memory=8, status="idle"),
    RunningApp(id="8", name="Authentication", cpu=3, memory=6, status="idle"),
]


class PerformanceService:
    def __init__(self, rng: Optional[random.Random] = None, metrics: Optional[List[SimulatedMetric]] = None):
        self.rng = rng or random.Random()
        self.metrics = metrics if metrics is not None else default_metrics()
        self._lock = threading.Lock()

    def snapshot(self) -> PerformanceSnapshot:
        with self._lock:
            for metric in self.metrics:
                metric.step(self.rng)
            readings = [metric.reading() for metric in self.metrics]

        return PerformanceSnapshot(
            metrics=readings,
            running_apps=list(RUNNING_APPS),
            last_updated=utcnow()
        )


@lru_cache()
def get_performance_service() -> PerformanceService:
    return PerformanceService()
