"""Command-line interface for lk-metrics."""
