"""In-process metrics collector, no external deps."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class MetricsCollector:
    run_count: int = 0
    seed_count: int = 0
    toggle_count: int = 0
    last_node_count: int = 0
    last_energized_count: int = 0
    latencies: list[float] = field(default_factory=list)
    _start_time: float = field(default_factory=time.time)

    def record_seed(self) -> None:
        self.seed_count += 1

    def record_toggle(self) -> None:
        self.toggle_count += 1

    def record_run(self, node_count: int, energized_count: int, latency_ms: float = 0.0) -> None:
        self.run_count += 1
        self.last_node_count = node_count
        self.last_energized_count = energized_count
        if latency_ms:
            self.latencies.append(latency_ms)
            if len(self.latencies) > 1000:
                self.latencies = self.latencies[-500:]

    def summary(self) -> dict:
        avg_latency = sum(self.latencies) / len(self.latencies) if self.latencies else 0
        return {
            "uptime_seconds": int(time.time() - self._start_time),
            "runs": self.run_count,
            "seeds": self.seed_count,
            "toggles": self.toggle_count,
            "last_node_count": self.last_node_count,
            "last_energized_count": self.last_energized_count,
            "avg_latency_ms": round(avg_latency, 3),
        }
