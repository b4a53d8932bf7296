from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from imagegen.discovery import ImageFolderEntry, is_valid_tag, scan_image_folders, split_image_folder_name


def test_split_image_folder_name() -> None:
    assert split_image_folder_name("base/12.14.0") == ImageFolderEntry(family="base", tag="12.14.0")
    assert split_image_folder_name("browsers/node12.4.0-chrome76/extra") == ImageFolderEntry(
        family="browsers", tag="node12.4.0-chrome76"
    )
    assert split_image_folder_name("included") == ImageFolderEntry(family="included", tag="")


def test_scan_lists_only_visible_directories(tmp_path: Path) -> None:
    root = tmp_path / "base"
    for name in ("12.14.0", "13.6.0", ".cache"):
        (root / name).mkdir(parents=True)
    (root / "README.md").write_text("images\n", encoding="utf-8")

    entries = scan_image_folders("base", cwd=tmp_path)

    assert sorted(e.tag for e in entries) == ["12.14.0", "13.6.0"]
    assert {e.family for e in entries} == {"base"}


def test_scan_keeps_listing_order(tmp_path: Path) -> None:
    root = tmp_path / "browsers"
    for name in ("zeta", "alpha", "mid-1", "beta"):
        (root / name).mkdir(parents=True)

    entries = scan_image_folders("browsers", cwd=tmp_path)

    assert [e.tag for e in entries] == os.listdir(root)


def test_scan_empty_root(tmp_path: Path) -> None:
    (tmp_path / "included").mkdir()
    assert scan_image_folders("included", cwd=tmp_path) == []


def test_scan_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        scan_image_folders("base", cwd=tmp_path)


def test_malformed_tag_is_kept_with_warning(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    (tmp_path / "base" / "bad tag").mkdir(parents=True)

    with caplog.at_level(logging.WARNING, logger="imagegen.discovery"):
        entries = scan_image_folders("base", cwd=tmp_path)

    assert entries == [ImageFolderEntry(family="base", tag="bad tag")]
    assert "base/bad tag" in caplog.text


@pytest.mark.parametrize("tag,ok", [("12.14.0", True), ("node12.4.0-chrome76", True), ("-x", False), ("a b", False), ("tag\n", False), ("", False)])
def test_is_valid_tag(tag: str, ok: bool) -> None:
    assert is_valid_tag(tag) is ok
