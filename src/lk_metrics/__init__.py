"""lk-metrics - Lorenz & Kidd object-oriented design metrics for C# code."""

__version__ = "0.1.0"

from .core.exceptions import LKMetricsError

__all__ = ["LKMetricsError", "__version__"]
