from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _ms(value: float) -> str:
    return f"{value:.3f}ms"


@dataclass(frozen=True)
class Attempt:
    rtt_ms: float
    error: str = ""

    def __str__(self) -> str:
        if self.error:
            return f"{_ms(self.rtt_ms)} ({self.error})"
        return _ms(self.rtt_ms)


@dataclass
class Stats:
    total_ms: float = 0.0
    mean_ms: float = 0.0
    median_ms: float = 0.0
    min_ms: float = 0.0
    max_ms: float = 0.0


def compute_stats(attempts: list[Attempt]) -> Stats:
    if not attempts:
        return Stats()

    rtts = sorted(a.rtt_ms for a in attempts)
    half = len(rtts) // 2
    if len(rtts) % 2 == 0:
        median = (rtts[half - 1] + rtts[half]) / 2
    else:
        median = rtts[half]

    total = sum(rtts)
    return Stats(
        total_ms=total,
        mean_ms=total / len(rtts),
        median_ms=median,
        min_ms=rtts[0],
        max_ms=rtts[-1],
    )


@dataclass
class Result:
    title: str
    endpoint: str = ""
    timestamp: str = field(default_factory=now_iso)
    attempts: list[Attempt] = field(default_factory=list)
    threshold_rtt_ms: float = 0.0
    healthy: bool = False
    degraded: bool = False
    down: bool = False
    notice: str = ""

    def status(self) -> str:
        if self.healthy:
            return "healthy"
        if self.degraded:
            return "degraded"
        if self.down:
            return "down"
        return "unknown"

    def compute_stats(self) -> Stats:
        return compute_stats(self.attempts)

    def __str__(self) -> str:
        stats = self.compute_stats()
        lines = [
            f"== {self.title} - {self.endpoint}",
            f"  Threshold: {_ms(self.threshold_rtt_ms)}",
            f"        Max: {_ms(stats.max_ms)}",
            f"        Min: {_ms(stats.min_ms)}",
            f"     Median: {_ms(stats.median_ms)}",
            f"       Mean: {_ms(stats.mean_ms)}",
            f"        All: [{', '.join(str(a) for a in self.attempts)}]",
            f" Assessment: {self.status()}",
        ]
        if self.notice:
            lines.append(f"     Notice: {self.notice}")
        return "\n".join(lines)
