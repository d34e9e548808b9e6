"""JSON reporter for class metrics."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import orjson

from ..metrics import ClassInfo


def render_json(class_infos: Sequence[ClassInfo], output_path: Path | None = None) -> str:
    """Render class metrics as a JSON array.

    Args:
        class_infos: Metrics records, one per class, in analysis order
        output_path: If provided, write to this file

    Returns:
        JSON string
    """
    # orjson serializes floats with shortest round-trip repr, so doubles survive
    json_bytes = orjson.dumps(
        [info.to_dict() for info in class_infos], option=orjson.OPT_INDENT_2
    )

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(json_bytes)

    return json_bytes.decode("utf-8")


def load_json(source: str | bytes | Path) -> list[ClassInfo]:
    """Load class metrics previously written by ``render_json``."""
    if isinstance(source, Path):
        source = source.read_bytes()
    return [ClassInfo.from_dict(item) for item in orjson.loads(source)]
