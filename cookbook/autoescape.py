"""Automatic HTML escaping of untrusted text, with trusted HTML left alone."""

from __future__ import annotations

import sys
from typing import Sequence

import jinja2
from markupsafe import Markup

_TEMPLATE = jinja2.Environment(autoescape=True).from_string(
    "<p>A: {{ a }}</p><p>B: {{ b }}</p>"
)


def render(a: str, b: str) -> str:
    """Render a as untrusted plain text and b as trusted HTML."""
    return _TEMPLATE.render(a=a, b=Markup(b))


def main(argv: Sequence[str] | None = None) -> int:
    """Render the same markup once escaped and once trusted."""
    sys.stdout.write(render("<b>Hello!</b>", "<b>Hello!</b>"))
    return 0