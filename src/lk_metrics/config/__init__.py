"""Configuration for lk-metrics."""

from .weights import DEFAULT_WEIGHTS, ComplexityWeights

__all__ = ["ComplexityWeights", "DEFAULT_WEIGHTS"]
