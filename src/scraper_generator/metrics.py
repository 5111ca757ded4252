"""In-process counters for generation requests, served by /api/stats."""

from __future__ import annotations

from collections import deque
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

RECENT_LIMIT = 10


@dataclass
class GenerationRecord:
    """Outcome of one submission."""

    domain: str
    success: bool
    full_version: bool = False
    status_code: int | None = None
    elapsed_ms: float | None = None
    error: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)

    def as_json(self) -> dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data


@dataclass
class ServerMetrics:
    """Totals since start plus the latest successes and failures."""

    start_time: datetime = field(default_factory=datetime.now)
    successful_requests: int = 0
    failed_requests: int = 0
    recent_requests: deque[GenerationRecord] = field(default_factory=lambda: deque(maxlen=RECENT_LIMIT))
    recent_errors: deque[GenerationRecord] = field(default_factory=lambda: deque(maxlen=RECENT_LIMIT))

    @property
    def total_requests(self) -> int:
        return self.successful_requests + self.failed_requests

    def record(self, record: GenerationRecord) -> None:
        if record.success:
            self.successful_requests += 1
        else:
            self.failed_requests += 1
            self.recent_errors.append(record)
        self.recent_requests.append(record)

    def get_success_rate(self) -> float:
        """Percentage of delivered files, 0.0 before the first request."""
        if not self.total_requests:
            return 0.0
        return 100 * self.successful_requests / self.total_requests

    def to_dict(self) -> dict[str, Any]:
        """Snapshot for JSON; recent entries are listed newest first."""
        return {
            "status": "healthy",
            "start_time": self.start_time.isoformat(),
            "uptime_seconds": (datetime.now() - self.start_time).total_seconds(),
            "requests": {
                "total": self.total_requests,
                "successful": self.successful_requests,
                "failed": self.failed_requests,
                "success_rate": round(self.get_success_rate(), 2),
            },
            "recent_requests": [r.as_json() for r in reversed(self.recent_requests)],
            "recent_errors": [r.as_json() for r in reversed(self.recent_errors)],
        }


_metrics = ServerMetrics()


def get_metrics() -> ServerMetrics:
    """Get the global metrics instance."""
    return _metrics


def record_request(
    domain: str,
    success: bool,
    full_version: bool = False,
    status_code: int | None = None,
    elapsed_ms: float | None = None,
    error: str | None = None,
) -> None:
    """Record a generation request in the global metrics."""
    _metrics.record(
        GenerationRecord(
            domain=domain,
            success=success,
            full_version=full_version,
            status_code=status_code,
            elapsed_ms=elapsed_ms,
            error=error,
        )
    )
