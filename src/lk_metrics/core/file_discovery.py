"""Source file discovery for metrics analysis."""

import os
from pathlib import Path

from loguru import logger

from ..config.defaults import DEFAULT_FILE_EXTENSIONS, DEFAULT_IGNORE_PATTERNS
from .exceptions import DiscoveryError


class FileDiscovery:
    """Finds analyzable source files under a root directory.

    Directories whose name matches an ignore pattern (build output, VCS and
    IDE folders) are pruned during the walk. Results are sorted so that the
    declaration order fed to the metrics engine is deterministic.
    """

    def __init__(
        self,
        project_root: Path,
        file_extensions: set[str] | None = None,
        ignore_patterns: set[str] | None = None,
    ) -> None:
        """Initialize file discovery.

        Args:
            project_root: Directory (or single file) to analyze
            file_extensions: Extensions to include (defaults to ``.cs``)
            ignore_patterns: Additional directory names to skip (merged with defaults)
        """
        self.project_root = project_root
        self.file_extensions = {
            ext.lower() for ext in (file_extensions or DEFAULT_FILE_EXTENSIONS)
        }
        self._ignore_patterns = set(DEFAULT_IGNORE_PATTERNS) | (ignore_patterns or set())

    def should_ignore_dir(self, name: str) -> bool:
        return name in self._ignore_patterns

    def is_source_file(self, path: Path) -> bool:
        return path.suffix.lower() in self.file_extensions

    def find_files(self) -> list[Path]:
        """Return all matching source files below the project root.

        Raises:
            DiscoveryError: If the project root does not exist
        """
        root = self.project_root
        if not root.exists():
            raise DiscoveryError(
                f"Path does not exist: {root}", context={"path": str(root)}
            )

        if root.is_file():
            return [root] if self.is_source_file(root) else []

        files: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(root):
            # Prune in place so os.walk never descends into ignored directories
            dirnames[:] = sorted(d for d in dirnames if not self.should_ignore_dir(d))
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if self.is_source_file(path):
                    files.append(path)

        logger.debug(f"Discovered {len(files)} source files under {root}")
        return files
