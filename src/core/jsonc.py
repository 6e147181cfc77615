"""JSONC parser - JSON with Comments support.

TIER 0: No internal imports, only Python stdlib.

Snippets files written by editors are JSONC: strict JSON plus // line
comments and /* block */ comments. This module turns such text back into
something json.loads() accepts without touching string literal content.
"""

import json
import re
from enum import Enum
from typing import Any

# A double-quoted literal: quote, escaped-or-non-quote chars, closing quote
_STRING_LITERAL = re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)
_NON_WHITESPACE = re.compile(r"\S")
_CLOSER_AHEAD = re.compile(r"\s*[\]}]")


class _Comment(Enum):
    """Comment state of the scanner."""

    NONE = 0
    LINE = 1
    BLOCK = 2


def _blank(span: str) -> str:
    return _NON_WHITESPACE.sub(" ", span)


def _drop(span: str) -> str:
    return ""


def _is_escaped(content: str, i: int) -> bool:
    """Check whether the quote at index i is preceded by a lone backslash."""
    if i < 1 or content[i - 1] != "\\":
        return False
    return i < 2 or content[i - 2] != "\\"


def strip_comments(content: str, preserve_whitespace: bool = True) -> str:
    """Strip JSONC comments from content.

    Removes:
    - Single-line comments: // comment (including the line terminator)
    - Multi-line comments: /* comment */

    Preserves strings containing // or /* sequences. Unterminated comments
    run to the end of input and are stripped as well.

    Args:
        content: JSONC content with comments.
        preserve_whitespace: If True, every non-whitespace character of a
            comment becomes a space and whitespace (line breaks, tabs) is
            kept, so offsets into the result match offsets into content.
            If False, comments are deleted.

    Returns:
        Content without comments (still may have trailing commas).
    """
    substitute = _blank if preserve_whitespace else _drop
    result: list[str] = []
    comment = _Comment.NONE
    in_string = False
    offset = 0
    i = 0

    while i < len(content):
        char = content[i]
        pair = content[i : i + 2]

        if comment is _Comment.NONE and char == '"' and not _is_escaped(content, i):
            in_string = not in_string

        if in_string:
            i += 1
            continue

        if comment is _Comment.NONE and pair in ("//", "/*"):
            result.append(content[offset:i])
            offset = i
            comment = _Comment.LINE if pair == "//" else _Comment.BLOCK
            i += 2
            continue

        if comment is _Comment.LINE and (char == "\n" or pair == "\r\n"):
            i += len(pair) if pair == "\r\n" else 1
            result.append(substitute(content[offset:i]))
            offset = i
            comment = _Comment.NONE
            continue

        if comment is _Comment.BLOCK and pair == "*/":
            i += 2
            result.append(substitute(content[offset:i]))
            offset = i
            comment = _Comment.NONE
            continue

        i += 1

    tail = content[offset:]
    result.append(tail if comment is _Comment.NONE else substitute(tail))
    return "".join(result)


def escape_string_tabs(content: str) -> str:
    """Escape raw tab characters inside string literals.

    Strict JSON forbids control characters in strings, but hand-edited
    snippet bodies often contain literal tabs. Tabs outside literals are
    ordinary whitespace and stay as they are.

    Args:
        content: JSON content (comments already stripped).

    Returns:
        Content with each tab inside a literal replaced by backslash-t.
    """
    return _STRING_LITERAL.sub(lambda m: m.group(0).replace("\t", "\\t"), content)


def strip_trailing_commas(content: str) -> str:
    """Remove commas directly followed by ] or } (whitespace allowed between).

    Commas inside string literals are kept.
    """
    result: list[str] = []
    in_string = False
    escaped = False

    for i, char in enumerate(content):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "," and _CLOSER_AHEAD.match(content, i + 1):
            continue
        result.append(char)

    return "".join(result)


def load_jsonc(content: str, allow_trailing_commas: bool = False) -> Any:
    """Parse JSONC content.

    Args:
        content: JSONC text.
        allow_trailing_commas: Also drop trailing commas before parsing.

    Returns:
        The parsed JSON value.

    Raises:
        json.JSONDecodeError: If the sanitized text is not valid JSON.
    """
    sanitized = escape_string_tabs(strip_comments(content, preserve_whitespace=False))
    if allow_trailing_commas:
        sanitized = strip_trailing_commas(sanitized)
    return json.loads(sanitized)
