"""
renderer.py

Responsibility: Deterministically render the bundled template assets.

Rules:
- Templates live under `imagegen/templates/` and are rendered with Jinja2.
- Undefined variables are errors (StrictUndefined), never silently empty.
- Directory rendering walks template files in sorted order.
- Output is UTF-8 with `\\n` newlines.

CircleCI parameter markers (`<< parameters.x >>`) are not Jinja2 syntax and
pass through unchanged.

This module intentionally does NOT know about image families or the CLI.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

log = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class RenderError(RuntimeError):
    pass


@dataclass(frozen=True)
class RenderResult:
    written: list[Path] = field(default_factory=list)

    @property
    def rendered_files(self) -> int:
        return len(self.written)


def _environment(search_path: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(search_path)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
    )


def _iter_template_files(template_dir: Path) -> list[Path]:
    """
    Return all files under template_dir, in deterministic lexicographic order
    (relative path ordering).
    """
    files: list[Path] = []
    for root, _dirs, filenames in os.walk(template_dir):
        root_path = Path(root)
        for name in filenames:
            files.append(root_path / name)
    files.sort(key=lambda p: str(p.relative_to(template_dir)).replace(os.sep, "/"))
    return files


def render_template(name: str, context: dict[str, Any], *, templates_dir: str | Path = TEMPLATES_DIR) -> str:
    """
    Render one template, addressed by its `/`-separated path under templates_dir.
    """
    env = _environment(Path(templates_dir))
    try:
        return env.get_template(name).render(**context)
    except TemplateError as e:
        raise RenderError(f"Failed rendering template file: {name}") from e


def render_template_dir(
    *,
    template_dir: str | Path,
    destination_dir: str | Path,
    context: dict[str, Any],
) -> RenderResult:
    """
    Render every file of template_dir into destination_dir, keeping relative paths.

    Creates destination subdirectories as needed.
    """
    tpl_dir = Path(template_dir).resolve()
    dst_dir = Path(destination_dir)

    if not tpl_dir.is_dir():
        raise RenderError(f"Template directory not found: {tpl_dir}")

    env = _environment(tpl_dir)
    written: list[Path] = []

    for src_path in _iter_template_files(tpl_dir):
        rel = src_path.relative_to(tpl_dir)
        name = str(rel).replace(os.sep, "/")
        try:
            out = env.get_template(name).render(**context)
        except TemplateError as e:
            raise RenderError(f"Failed rendering template file: {rel}") from e

        dst_path = dst_dir / rel
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        dst_path.write_text(out, encoding="utf-8", newline="\n")
        log.debug("rendered %s -> %s", name, dst_path)
        written.append(dst_path)

    return RenderResult(written=written)
