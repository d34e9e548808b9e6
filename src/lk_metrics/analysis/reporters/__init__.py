"""Reporters for class metrics."""

from .console import ConsoleReporter
from .json_reporter import load_json, render_json

__all__ = ["ConsoleReporter", "load_json", "render_json"]
