"""JSON string literal escaping.

Characters that must not appear verbatim inside a JSON string literal:

- ``\\`` and ``"``, which would end or corrupt the literal;
- the C0 controls U+0000..U+001F, which RFC 8259 forbids unescaped;
- U+2028 LINE SEPARATOR and U+2029 PARAGRAPH SEPARATOR, which RFC 8259 allows
  but which terminate lines in script source, so output stays safe to embed.

LF, CR and TAB use their two-character escapes; every other escaped character
uses ``\\u`` with four lowercase hex digits. Everything else, including
non-ASCII text and lone surrogates, is copied through unchanged.
"""

from __future__ import annotations

import re
from typing import Iterator

ESCAPE = re.compile(r'[\x00-\x1f\\"\u2028\u2029]')

ESCAPE_DCT: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
for _code in (*range(0x20), 0x2028, 0x2029):
    ESCAPE_DCT.setdefault(chr(_code), f"\\u{_code:04x}")
del _code


def _replace(match: re.Match[str]) -> str:
    return ESCAPE_DCT[match.group(0)]


def escape(s: str) -> str:
    """Return the quoted JSON string literal for ``s``."""
    return '"' + ESCAPE.sub(_replace, s) + '"'


def escape_chunks(s: str) -> Iterator[str]:
    """Yield the body of the literal for ``s`` (without quotes) in pieces.

    Verbatim runs are yielded as slices of ``s`` and escapes as table
    entries, so nothing is built per character.
    """
    start = 0
    for match in ESCAPE.finditer(s):
        end = match.start()
        if end > start:
            yield s[start:end]
        yield ESCAPE_DCT[match.group(0)]
        start = end + 1
    if start < len(s):
        yield s[start:]
