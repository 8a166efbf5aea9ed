"""Metrics registry shared by tool executions."""

from .metrics import Counter, Histogram, MetricsRegistry, ToolMetrics

__all__ = ["Counter", "Histogram", "MetricsRegistry", "ToolMetrics"]
