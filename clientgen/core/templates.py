"""Jinja2 environment for the TypeScript templates."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from clientgen.lib.settings import get_settings

BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def templates_dir() -> Path:
    """Directory holding the templates, honoring CLIENTGEN_TEMPLATES_DIR overrides."""
    return get_settings().templates_dir or BUNDLED_TEMPLATES_DIR


@lru_cache
def get_environment(directory: Path) -> Environment:
    """Return the (cached) environment for a template directory."""
    return Environment(
        loader=FileSystemLoader(str(directory)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,  # noqa: S701 - Generating TypeScript code
    )


def render(template_name: str, **context: Any) -> str:
    """Render a template from the active template directory."""
    template = get_environment(templates_dir()).get_template(template_name)
    return template.render(**context)
