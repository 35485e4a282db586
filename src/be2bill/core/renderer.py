"""
HTML rendering of signed form requests.
"""

from __future__ import annotations

import html
import re
from typing import Any, Mapping, Optional

from .constants import FORM_PATH, HTML_OPTION_FORM, HTML_OPTION_SUBMIT
from .options import flatten, stringify

__all__ = ["HTMLRenderer"]

_ATTRIBUTE_NAME = re.compile(r"^[A-Za-z_:][-A-Za-z0-9_:.]*$")


def _escape(value: Any) -> str:
    return html.escape(stringify(value), quote=True)


def _attributes(attributes: Optional[Mapping[str, Any]]) -> str:
    rendered = []
    for name in sorted(attributes or {}):
        if not _ATTRIBUTE_NAME.match(name):
            raise ValueError(f"Invalid HTML attribute name: {name!r}")
        rendered.append(f' {name}="{_escape(attributes[name])}"')
    return "".join(rendered)


class HTMLRenderer:
    """
    Renders a parameter map as a self-submitting Be2bill form.

    Hidden inputs follow the flattened parameters sorted by name. The optional
    ``FORM`` and ``SUBMIT`` entries of ``html_options`` hold extra attributes
    for the ``<form>`` tag and the submit button.
    """

    def __init__(self, base_url: str) -> None:
        self.url = base_url.rstrip("/") + FORM_PATH

    def render(
        self,
        params: Mapping[str, Any],
        html_options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        html_options = html_options or {}
        hidden = "".join(
            f'\n  <input type="hidden" name="{html.escape(name, quote=True)}"'
            f' value="{html.escape(value, quote=True)}" />'
            for name, value in sorted(flatten(params).items())
        )
        form_attributes = _attributes(html_options.get(HTML_OPTION_FORM))
        submit_attributes = _attributes(html_options.get(HTML_OPTION_SUBMIT))
        action = html.escape(self.url, quote=True)
        return (
            f'<form method="post" action="{action}"{form_attributes}>{hidden}\n'
            f'  <input type="submit"{submit_attributes} />\n'
            "</form>"
        )
