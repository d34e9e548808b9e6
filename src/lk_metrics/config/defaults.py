"""Default configurations for lk-metrics."""

from pathlib import Path

# Source file extensions analyzed by default
DEFAULT_FILE_EXTENSIONS = [
    ".cs",  # C# (tree-sitter)
]

# Directory names skipped during discovery (build output, VCS, IDE state)
DEFAULT_IGNORE_PATTERNS = [
    ".git",
    ".svn",
    ".hg",
    ".vs",
    ".idea",
    ".vscode",
    "bin",
    "obj",
    "packages",
    "node_modules",
    "TestResults",
]

# Default location of the weights file, relative to the analyzed root
DEFAULT_WEIGHTS_FILENAME = ".lk-metrics.yaml"


def get_default_weights_path(project_root: Path) -> Path:
    """Get the default complexity-weights file path for a project."""
    return project_root / DEFAULT_WEIGHTS_FILENAME
