"""
cli.py

Responsibility: CLI entrypoint for imagegen.

Commands:
- `base-image VERSION`: scaffold `base/<VERSION>` (see `scaffold.py`)
- `config`: regenerate `circle.yml` from the image folders (see `pipeline.py`)

Both commands work relative to the current directory. An invalid version tag
exits with status 1; filesystem and rendering errors are not caught.
"""

from __future__ import annotations

import argparse
import logging
import sys

from imagegen import __version__
from imagegen.pipeline import generate_config
from imagegen.scaffold import completion_notice, generate_base_image
from imagegen.version_tag import VersionTagError


def base_image_cmd(args: argparse.Namespace) -> int:
    try:
        result = generate_base_image(args.version_tag)
    except VersionTagError as e:
        print(str(e), file=sys.stderr)
        return 1
    print(completion_notice(f"base/{result.version_tag}"))
    return 0


def config_cmd(args: argparse.Namespace) -> int:
    generate_config()
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="imagegen", description="Generate Docker image folders and the CircleCI config")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    # also accepted after the subcommand; unset there unless given
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    b = sub.add_parser(
        "base-image", parents=[common], help="Create base/<version> with Dockerfile, README.md and build.sh"
    )
    # missing tag is reported by parse_version_tag
    b.add_argument("version_tag", nargs="?", default=None, help='Node version tag like "13.6.0"')
    b.set_defaults(func=base_image_cmd)

    c = sub.add_parser("config", parents=[common], help="Regenerate circle.yml from base/, browsers/ and included/")
    c.set_defaults(func=config_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    return int(args.func(args))


def generate_base_image_main(argv: list[str] | None = None) -> int:
    """`generate-base-image VERSION` console script."""
    argv = sys.argv[1:] if argv is None else argv
    return main(["base-image", *argv])


def generate_config_main(argv: list[str] | None = None) -> int:
    """`generate-config` console script."""
    argv = sys.argv[1:] if argv is None else argv
    return main(["config", *argv])


if __name__ == "__main__":
    raise SystemExit(main())
