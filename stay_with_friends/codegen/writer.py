"""
Write the generated files to disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

from stay_with_friends.core.logging_config import get_logger

from .graphql import render_sdl, render_typedefs_module
from .introspect import EntitySpec, collect_entities
from .typescript import render_backend_types, render_frontend_types, render_transformers

logger = get_logger(__name__)


def render_all(entities: Optional[Sequence[EntitySpec]] = None) -> Dict[str, str]:
    """Render every generated file, keyed by file name."""
    entities = list(entities if entities is not None else collect_entities())
    sdl = render_sdl(entities)
    return {
        "schema.graphql": sdl,
        "typedefs.ts": render_typedefs_module(sdl),
        "types.ts": render_backend_types(entities),
        "frontend-types.ts": render_frontend_types(entities),
        "transformers.ts": render_transformers(entities),
    }


def generate(out_dir: Path) -> List[Path]:
    """Write the generated files into ``out_dir``.

    Files whose content did not change are left untouched.

    Returns:
        Paths of the files that were written
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name, content in render_all().items():
        path = out_dir / name
        if path.exists() and path.read_text(encoding="utf-8") == content:
            logger.debug(f"{path} is up to date")
            continue
        path.write_text(content, encoding="utf-8")
        written.append(path)
        logger.info(f"Wrote {path}")
    return written
