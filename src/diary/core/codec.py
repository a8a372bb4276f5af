"""Escaping for tab-delimited diary fields.

A field may hold any text. On disk it must fit on one line with no tabs, so
backslash, tab and line feed are written as two-character escapes.
"""

import re

_ESCAPE_RE = re.compile(r"\\([\\tn])")
_UNESCAPES = {"\\": "\\", "t": "\t", "n": "\n"}


def escape_field(value: str) -> str:
    """Escape backslash, tab and newline so the value fits in one TSV cell."""
    # Backslash first, otherwise the escapes added below would be doubled
    return value.replace("\\", "\\\\").replace("\t", "\\t").replace("\n", "\\n")


def unescape_field(value: str) -> str:
    """Reverse escape_field.

    Only \\\\, \\t and \\n are recognized. Any other backslash sequence,
    including a trailing lone backslash, is kept as written.
    """
    return _ESCAPE_RE.sub(lambda m: _UNESCAPES[m.group(1)], value)
