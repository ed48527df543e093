"""
Metrics Collection
Prometheus metrics for sessions, bridge traffic and getter requests
"""

import time

from prometheus_client import Counter, Gauge, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the UI server.
    """

    def __init__(self) -> None:
        # Session metrics
        self.sessions_active = Gauge(
            "rui_sessions_active",
            "Number of sessions with a live browser connection",
        )
        self.sessions_total = Counter(
            "rui_sessions_total",
            "Total number of sessions created",
        )

        # Bridge metrics
        self.inbound_events = Counter(
            "rui_inbound_events_total",
            "Total number of messages received from browsers",
            ["command"],
        )
        self.outbound_frames = Counter(
            "rui_outbound_frames_total",
            "Total number of script frames sent to browsers",
        )
        self.getter_duration = Histogram(
            "rui_getter_duration_seconds",
            "Browser getter request round-trip in seconds",
            ["function"],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0],
        )
        self.getter_timeouts = Counter(
            "rui_getter_timeouts_total",
            "Total number of getter requests with no answer",
            ["function"],
        )

        # Error metrics
        self.errors_total = Counter(
            "rui_errors_total",
            "Total number of reported framework errors",
            ["error_type"],
        )

        # System metrics
        self.uptime = Gauge(
            "rui_uptime_seconds",
            "Server uptime in seconds",
        )
        self.start_time = time.time()

    def record_session_opened(self) -> None:
        """Record a new browser connection."""
        self.sessions_total.inc()
        self.sessions_active.inc()

    def record_session_closed(self) -> None:
        """Record a dropped browser connection."""
        self.sessions_active.dec()

    def record_inbound(self, command: str) -> None:
        """Record an inbound message."""
        self.inbound_events.labels(command=command).inc()

    def record_outbound(self) -> None:
        """Record an outbound frame."""
        self.outbound_frames.inc()

    def record_getter(self, function: str, duration: float) -> None:
        """Record a completed getter request."""
        self.getter_duration.labels(function=function).observe(duration)

    def record_getter_timeout(self, function: str) -> None:
        """Record a getter request that timed out."""
        self.getter_timeouts.labels(function=function).inc()

    def record_error(self, error_type: str) -> None:
        """Record an error."""
        self.errors_total.labels(error_type=error_type).inc()

    def update_uptime(self) -> None:
        """Update the uptime metric."""
        self.uptime.set(time.time() - self.start_time)

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        self.update_uptime()
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()
