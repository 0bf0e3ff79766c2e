"""
Shared metrics configuration for argcache.
"""

from typing import Any, Dict, Optional
import threading

from prometheus_client import CollectorRegistry, Counter


class CacheMetrics:
    """Prometheus counters for namespaced cache operations."""

    COUNTERS = {
        "cache_hits_total": "Total cache hits",
        "cache_misses_total": "Total cache misses",
        "cache_puts_total": "Total cache writes",
        "cache_evictions_total": "Total single-entry evictions",
        "cache_clears_total": "Total namespace clears",
    }

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry if registry is not None else CollectorRegistry()
        self._metrics: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up the per-namespace counters."""
        with self._lock:
            for name, documentation in self.COUNTERS.items():
                self._metrics[name] = Counter(
                    name,
                    documentation,
                    ["namespace"],
                    registry=self.registry
                )

    def get_metric(self, name: str):
        """Get a metric by name."""
        return self._metrics.get(name)

    def increment_counter(self, metric_name: str, **labels):
        """Increment a counter metric."""
        if metric_name in self._metrics:
            self._metrics[metric_name].labels(**labels).inc()

    def record_hit(self, namespace: str):
        self.increment_counter("cache_hits_total", namespace=namespace)

    def record_miss(self, namespace: str):
        self.increment_counter("cache_misses_total", namespace=namespace)

    def record_put(self, namespace: str):
        self.increment_counter("cache_puts_total", namespace=namespace)

    def record_eviction(self, namespace: str):
        self.increment_counter("cache_evictions_total", namespace=namespace)

    def record_clear(self, namespace: str):
        self.increment_counter("cache_clears_total", namespace=namespace)

    def sample(self, metric_name: str, namespace: str) -> float:
        """Read the current value of a counter for one namespace."""
        value = self.registry.get_sample_value(metric_name, {"namespace": namespace})
        return value or 0.0


def get_cache_metrics(registry: Optional[CollectorRegistry] = None) -> CacheMetrics:
    """Get a metrics collector for cache operations."""
    return CacheMetrics(registry)
