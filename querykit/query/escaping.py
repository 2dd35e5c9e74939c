# querykit/query/escaping.py
"""
JavaScript string-literal escaping for query values.

Output is safe to embed between quotes in a JS/JSON string literal and inside
HTML: quotes, backslash, control characters, HTML-sensitive characters and
everything outside ASCII are turned into escape sequences.
"""

import json

# json.dumps already covers quotes, backslash, control characters and
# non-ASCII (as \uXXXX, surrogate pairs above the BMP). These are the
# HTML-sensitive extras.
_HTML_SENSITIVE = {
    "'": "\\u0027",
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}
_HTML_SENSITIVE_TABLE = str.maketrans(_HTML_SENSITIVE)


def javascript_string_encode(value: str | None) -> str:
    """
    Escape a value the way a JavaScript string literal needs it.

    A value that needs no escaping is returned unchanged, so the
    function is idempotent on plain text like "John Doe".
    """
    if not value:
        return ""

    encoded = json.dumps(value, ensure_ascii=True)[1:-1]
    return encoded.translate(_HTML_SENSITIVE_TABLE)
