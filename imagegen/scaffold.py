"""
scaffold.py

Responsibility: create a new versioned base image folder `base/<tag>`.

Flow:
1) Validate the version tag (strict `MAJOR.MINOR.PATCH`)
2) Remove an existing `base/<tag>` folder, without asking
3) Render `Dockerfile`, `README.md` and `build.sh` from `templates/base-image/`
4) Mark `build.sh` executable

Nothing is written when validation fails. Filesystem errors are not caught.
"""

from __future__ import annotations

import shutil
import stat
from dataclasses import dataclass
from pathlib import Path

from imagegen.renderer import TEMPLATES_DIR, render_template_dir
from imagegen.version_tag import parse_version_tag

BASE_ROOT = "base"
TEMPLATE_DIR = TEMPLATES_DIR / "base-image"
BUILD_SCRIPT = "build.sh"


@dataclass(frozen=True)
class ScaffoldResult:
    version_tag: str
    output_folder: Path
    files: list[Path]


def _make_executable(path: Path) -> None:
    # chmod a+x
    mode = path.stat().st_mode
    path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def completion_notice(output_folder: str | Path) -> str:
    return (
        f"\nPlease add the newly generated folder {output_folder} to Git and update CircleCI file with\n"
        "\n"
        "    imagegen config\n"
        "\n"
        'Build the Docker container locally to make sure it is correct and update "base/README.md" list\n'
        "of images with the new image information.\n"
    )


def generate_base_image(version_tag: str | None, *, root: str | Path = ".") -> ScaffoldResult:
    tag = parse_version_tag(version_tag)

    relative_folder = Path(BASE_ROOT) / tag
    output_folder = Path(root) / relative_folder
    if output_folder.is_dir():
        print(f'removing existing folder "{relative_folder}"')
        shutil.rmtree(output_folder)
    print(f'creating "{relative_folder}"')
    output_folder.mkdir(parents=True)

    result = render_template_dir(
        template_dir=TEMPLATE_DIR,
        destination_dir=output_folder,
        context={"version_tag": tag, "generator": Path(__file__).name},
    )
    for path in result.written:
        if path.name == BUILD_SCRIPT:
            _make_executable(path)
        print(f"Saved {relative_folder / path.name}")

    return ScaffoldResult(version_tag=tag, output_folder=output_folder, files=result.written)
