from typing import List, Literal
from datetime import datetime
from pydantic import BaseModel


class MetricReading(BaseModel):
    name: str
    value: float
    unit: str
    status: Literal["good", "warning", "critical"]
    trend: Literal["up", "down", "stable"]
    history: List[float]


class RunningApp(BaseModel):
    id: str
    name: str
    cpu: int
    memory: int
    status: Literal["running", "idle", "busy"]


class PerformanceSnapshot(BaseModel):
    metrics: List[MetricReading]
    running_apps: List[RunningApp]
    last_updated: datetime
