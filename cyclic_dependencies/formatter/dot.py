"""Graphviz output — one cluster per cycle, optionally rendered to PNG."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from cyclic_dependencies.models import Cycle

logger = logging.getLogger(__name__)

DOT_FILENAME = "cycles.dot"
PNG_FILENAME = "cycles.png"


def _quote(name: str) -> str:
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def generate_dot(cycles: Sequence[Cycle]) -> str:
    lines = ["digraph G {"]
    for index, cycle in enumerate(cycles):
        lines.append(f"  subgraph cluster_{index} {{")
        lines.append(f'    label="Cycle {index + 1}";')
        for source, target in zip(cycle.nodes, cycle.nodes[1:]):
            lines.append(f"    {_quote(source)} -> {_quote(target)};")
        lines.append("  }")
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_png(dot_path: Path, png_path: Path) -> bool:
    """Render ``dot_path`` with the Graphviz ``dot`` executable.

    Returns False (and logs why) when Graphviz is missing or fails.
    """
    executable = shutil.which("dot")
    if executable is None:
        logger.warning("Graphviz 'dot' executable not found; skipping %s", png_path.name)
        return False
    try:
        subprocess.run(
            [executable, "-Tpng", str(dot_path), "-o", str(png_path)],
            check=True,
            capture_output=True,
        )
    except (subprocess.CalledProcessError, OSError) as e:
        logger.warning("Failed to generate visualization: %s", e)
        return False
    return True


def write_dot_file(
    cycles: Sequence[Cycle],
    output_dir: Path,
    render: bool = True,
) -> tuple[Path, Path | None]:
    """Write cycles.dot into ``output_dir`` and, when possible, cycles.png.

    Returns ``(dot_path, png_path)``; ``png_path`` is None when no image was
    produced.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    dot_path = output_dir / DOT_FILENAME
    dot_path.write_text(generate_dot(cycles), encoding="utf-8")
    logger.info("DOT file generated: %s", dot_path)

    if not render:
        return dot_path, None

    png_path = output_dir / PNG_FILENAME
    if render_png(dot_path, png_path):
        logger.info("Cycle visualization generated: %s", png_path)
        return dot_path, png_path
    return dot_path, None
