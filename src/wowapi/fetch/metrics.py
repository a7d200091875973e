"""Metrics collection for the fetch pipeline."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class FetchMetrics:
    """Metrics for fetch pipeline calls.

    Singleton class that tracks network calls, client-side cache hits,
    origin revalidations and failures.
    """

    network_calls_total: dict[int, int] = field(default_factory=dict)
    cache_hits_total: int = 0
    revalidated_total: int = 0
    failures_total: dict[str, int] = field(default_factory=dict)
    bytes_total: int = 0
    duration_ms_total: float = 0.0
    network_call_count: int = 0

    _instance: ClassVar["FetchMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "FetchMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_network_call(
        self, status_code: int, bytes_received: int, duration_ms: float
    ) -> None:
        """Record a completed request to the origin.

        Args:
            status_code: HTTP status code.
            bytes_received: Number of body bytes received.
            duration_ms: Request duration in milliseconds.
        """
        self.network_calls_total[status_code] = (
            self.network_calls_total.get(status_code, 0) + 1
        )
        self.bytes_total += bytes_received
        self.duration_ms_total += duration_ms
        self.network_call_count += 1

    def record_cache_hit(self) -> None:
        """Record a fresh cache hit served without network."""
        self.cache_hits_total += 1

    def record_revalidated(self) -> None:
        """Record a 304 response that revalidated a cached envelope."""
        self.revalidated_total += 1

    def record_failure(self, kind: str) -> None:
        """Record a failed pipeline call.

        Args:
            kind: Error type name, e.g. "TransportError".
        """
        self.failures_total[kind] = self.failures_total.get(kind, 0) + 1

    def to_dict(self) -> dict[str, int | float | dict[str, int] | dict[int, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "network_calls_total": dict(self.network_calls_total),
            "cache_hits_total": self.cache_hits_total,
            "revalidated_total": self.revalidated_total,
            "failures_total": dict(self.failures_total),
            "bytes_total": self.bytes_total,
            "duration_ms_total": self.duration_ms_total,
            "network_call_count": self.network_call_count,
        }

    @property
    def avg_duration_ms(self) -> float:
        """Calculate average network call duration."""
        if self.network_call_count == 0:
            return 0.0
        return self.duration_ms_total / self.network_call_count
