"""
pipeline.py

Responsibility: generate the CircleCI config `circle.yml` from the image folders.

High-level flow:
1) Scan `base/`, `browsers/` and `included/` (all roots before any rendering)
2) Print each family's entries for the operator
3) Render preamble + one workflow per family
4) Overwrite `circle.yml`

The output is plain template text; it is not parsed or validated here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path

import yaml

from imagegen.discovery import ImageFolderEntry, scan_image_folders
from imagegen.renderer import render_template

CONFIG_FILENAME = "circle.yml"
SEPARATOR = "\n"


@dataclass(frozen=True)
class ImageFamily:
    """One scanned root and the CircleCI workflow/job generated for it."""

    root: str
    heading: str
    workflow: str
    job: str
    skip_tags: frozenset[str] = field(default_factory=frozenset)

    def includes(self, entry: ImageFolderEntry) -> bool:
        return entry.tag not in self.skip_tags


FAMILIES: tuple[ImageFamily, ...] = (
    ImageFamily(
        root="base",
        heading="base images",
        workflow="build-base-images",
        job="build-base-image",
    ),
    ImageFamily(
        root="browsers",
        heading="browser images",
        workflow="build-browser-images",
        job="build-browser-image",
        # old images that cannot be tested (no npx for example)
        skip_tags=frozenset({"chrome63-ff57"}),
    ),
    ImageFamily(
        root="included",
        heading="included images",
        workflow="build-included-images",
        job="build-included-image",
    ),
)


def render_preamble() -> str:
    return render_template("circleci/preamble.yml", {"generator": Path(__file__).name})


def render_workflow(family: ImageFamily, entries: Iterable[ImageFolderEntry]) -> str:
    included = [entry for entry in entries if family.includes(entry)]
    return render_template("circleci/workflow.yml", {"family": family, "entries": included})


def render_config(
    discovered: Mapping[str, list[ImageFolderEntry]],
    families: tuple[ImageFamily, ...] = FAMILIES,
) -> str:
    """
    Assemble the whole document. `discovered` maps family root -> entries;
    a family without a key renders an empty workflow.
    """
    blocks = [render_workflow(family, discovered.get(family.root, [])) for family in families]
    return render_preamble() + SEPARATOR.join(blocks)


def _dump_entries(entries: list[ImageFolderEntry]) -> str:
    return yaml.safe_dump([asdict(e) for e in entries], default_flow_style=False, sort_keys=False)


def discover_images(
    cwd: str | Path = ".",
    families: tuple[ImageFamily, ...] = FAMILIES,
) -> dict[str, list[ImageFolderEntry]]:
    discovered: dict[str, list[ImageFolderEntry]] = {}
    for family in families:
        discovered[family.root] = scan_image_folders(family.root, cwd=cwd)
    for family in families:
        print(f" *** {family.heading} ***")
        print(_dump_entries(discovered[family.root]), end="")
    return discovered


def generate_config(cwd: str | Path = ".") -> Path:
    discovered = discover_images(cwd)
    text = render_config(discovered)

    output = Path(cwd) / CONFIG_FILENAME
    output.write_text(text, encoding="utf-8", newline="\n")
    print(f"generated {CONFIG_FILENAME}")
    return output
