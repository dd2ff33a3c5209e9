"""
Markup wrappers for user-facing strings.

FormattableMarkup keeps a template and its placeholder arguments apart
until it is rendered with str(). Placeholders:
  @name  HTML-escaped value
  %name  HTML-escaped value wrapped in <em class="placeholder">
  :name  HTML-escaped URL; javascript:/data:/vbscript: schemes are dropped
"""

import html
import re
from typing import Any, Dict, Optional

_PLACEHOLDER = re.compile(r"[@%:][A-Za-z_][A-Za-z0-9_]*")
_UNSAFE_SCHEMES = ("javascript:", "data:", "vbscript:")


def _strip_dangerous_scheme(url: str) -> str:
    lowered = url.strip().lower()
    for scheme in _UNSAFE_SCHEMES:
        if lowered.startswith(scheme):
            return url.strip()[len(scheme):]
    return url


class FormattableMarkup:
    def __init__(self, template: str, arguments: Optional[Dict[str, Any]] = None):
        self.template = template
        self.arguments = dict(arguments or {})

    def _replace(self, match: "re.Match[str]") -> str:
        key = match.group(0)
        if key not in self.arguments:
            return key
        value = str(self.arguments[key])
        if key.startswith("@"):
            return html.escape(value)
        if key.startswith("%"):
            return f'<em class="placeholder">{html.escape(value)}</em>'
        return html.escape(_strip_dangerous_scheme(value))

    def __str__(self) -> str:
        return _PLACEHOLDER.sub(self._replace, self.template)

    def __len__(self) -> int:
        return len(str(self))

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (FormattableMarkup, str)):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return f"FormattableMarkup({self.template!r}, {self.arguments!r})"


def t(template: str, arguments: Optional[Dict[str, Any]] = None) -> FormattableMarkup:
    """Wrap a user-facing string; translation is a pass-through"""
    return FormattableMarkup(template, arguments)
