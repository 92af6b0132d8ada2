"""Quoting of text as JSON string literals, optionally safe for HTML."""

import re

_HEX = "0123456789abcdef"


def _unicode_escape(code: int) -> str:
    return "\\u00" + _HEX[code >> 4] + _HEX[code & 0xF]


_PLAIN_TABLE: dict[int, str] = {code: _unicode_escape(code) for code in range(0x20)}
_PLAIN_TABLE.update(
    {
        ord("\n"): "\\n",
        ord("\r"): "\\r",
        ord("\t"): "\\t",
        ord('"'): '\\"',
        ord("\\"): "\\\\",
    }
)

_HTML_TABLE: dict[int, str] = dict(_PLAIN_TABLE)
_HTML_TABLE.update({ord(ch): _unicode_escape(ord(ch)) for ch in "<>&"})
# LINE SEPARATOR and PARAGRAPH SEPARATOR break JSONP, so they are always escaped.
_HTML_TABLE[0x2028] = "\\u2028"
_HTML_TABLE[0x2029] = "\\u2029"

_SURROGATE = re.compile("[\ud800-\udfff]")


def quote(s: str) -> str:
    """Return ``s`` as a JSON string literal, escaping only what JSON requires."""
    return '"' + s.translate(_PLAIN_TABLE) + '"'


def quote_html(s: str) -> str:
    """Return ``s`` as a JSON string literal that is safe inside HTML script tags.

    Besides the JSON escapes, ``<``, ``>`` and ``&`` are written as unicode
    escapes, U+2028 and U+2029 are escaped, and code points that are not valid
    characters (lone surrogates) are replaced with an escaped U+FFFD.
    """
    body = s.translate(_HTML_TABLE)
    body = _SURROGATE.sub(lambda _match: "\\ufffd", body)
    return '"' + body + '"'