"""
discovery.py

Responsibility: list the image folders under one family root.

Each immediate subdirectory `<root>/<tag>` becomes an ImageFolderEntry.
Entries keep the order the directory listing returns; nothing is sorted.
Dot-directories are ignored.

Folder names are not rejected: a tag that is not a valid Docker tag is still
returned, with a warning in the log.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

# https://docs.docker.com/reference/cli/docker/image/tag/
DOCKER_TAG_RE = re.compile(r"[A-Za-z0-9_][A-Za-z0-9_.-]{0,127}")


@dataclass(frozen=True)
class ImageFolderEntry:
    family: str
    tag: str


def split_image_folder_name(folder_name: str) -> ImageFolderEntry:
    """
    Split a `<root>/<tag>` relative path. Extra segments are ignored and a
    missing tag becomes "".
    """
    parts = folder_name.split("/")
    family = parts[0]
    tag = parts[1] if len(parts) > 1 else ""
    return ImageFolderEntry(family=family, tag=tag)


def is_valid_tag(tag: str) -> bool:
    return DOCKER_TAG_RE.fullmatch(tag) is not None


def scan_image_folders(root_dir: str, *, cwd: str | Path = ".") -> list[ImageFolderEntry]:
    """
    Return one entry per subdirectory of `cwd/root_dir`.

    A missing root raises FileNotFoundError.
    """
    entries: list[ImageFolderEntry] = []
    with os.scandir(Path(cwd) / root_dir) as it:
        for dir_entry in it:
            if dir_entry.name.startswith(".") or not dir_entry.is_dir():
                continue
            entry = split_image_folder_name(f"{root_dir}/{dir_entry.name}")
            if not is_valid_tag(entry.tag):
                log.warning("folder %s/%s is not a valid Docker tag", root_dir, dir_entry.name)
            log.debug("found image folder %s/%s", entry.family, entry.tag)
            entries.append(entry)
    return entries
