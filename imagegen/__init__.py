"""
imagegen package

Build tooling for a repository of Docker image folders (`base/`, `browsers/`,
`included/`).

Key responsibilities are split across modules:
- `version_tag.py`: strict `MAJOR.MINOR.PATCH` validation of version tags
- `renderer.py`: Jinja2 rendering of the bundled template assets
- `scaffold.py`: create a new `base/<tag>` image folder from templates
- `discovery.py`: list image folders under each family root
- `pipeline.py`: render the aggregate CircleCI config (`circle.yml`)
- `cli.py`: CLI entrypoint and orchestration
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
