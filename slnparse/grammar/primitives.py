"""Token-level parsers shared by every construct in a .sln file.

Every parser here is a plain function ``(text, pos) -> Success | Failure``.
A Failure never consumes input, so callers can retry another candidate at
the same position.
"""

from __future__ import annotations

import re
import uuid
from typing import Any, Callable

from slnparse.config import invariant_equal
from slnparse.grammar.result import Failure, Success, fail

Parser = Callable[[str, int], "Success[Any] | Failure"]

_SPACES_RE = re.compile(r"[ \t\r\n]*")
_BLANKS_RE = re.compile(r"[ \t]*")
_LINE_END_RE = re.compile(r"\r\n|\r|\n")
_HEX_RUN_RE = re.compile(r"[0-9A-Fa-f-]*")
_GUID_BODY_RE = re.compile(
    r"[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}"
    r"|[0-9A-Fa-f]{32}"
)
_WORD_CHAR_RE = re.compile(r"\w")

OPEN_BRACE = "{"
CLOSE_BRACE = "}"
QUOTE = '"'
PIPE = "|"
DOT = "."
EQUALS = "="
COMMA = ","
OPEN_PAREN = "("
CLOSE_PAREN = ")"


def skip_spaces(text: str, pos: int) -> int:
    """Skip spaces, tabs and line breaks."""
    return _SPACES_RE.match(text, pos).end()


def skip_blanks(text: str, pos: int) -> int:
    """Skip spaces and tabs, staying on the current line."""
    return _BLANKS_RE.match(text, pos).end()


def char(text: str, pos: int, c: str) -> Success[str] | Failure:
    if text.startswith(c, pos):
        return Success(c, pos + 1)
    return fail(text, pos, f"'{c}'")


def literal(text: str, pos: int, word: str) -> Success[str] | Failure:
    if text.startswith(word, pos):
        return Success(word, pos + len(word))
    return fail(text, pos, f"'{word}'")


def literal_ci(text: str, pos: int, word: str) -> Success[str] | Failure:
    """Match ``word`` ignoring case; returns the text as written."""
    candidate = text[pos:pos + len(word)]
    if len(candidate) == len(word) and invariant_equal(candidate, word):
        return Success(candidate, pos + len(word))
    return fail(text, pos, f"'{word}'")


def keyword(text: str, pos: int, word: str) -> Success[str] | Failure:
    """Match ``word`` after optional whitespace, not followed by a word character.

    Keeps ``EndGlobal`` from matching the start of ``EndGlobalSection``.
    """
    start = skip_spaces(text, pos)
    result = literal(text, start, word)
    if not result.ok:
        return result
    if _WORD_CHAR_RE.match(text, result.position):
        return fail(text, start, f"'{word}'")
    return result


def looking_at(parser: Parser, text: str, pos: int) -> bool:
    """Non-consuming lookahead."""
    return parser(text, pos).ok


def parse_guid(text: str, pos: int) -> Success[uuid.UUID] | Failure:
    """Parse ``{XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX}``."""
    opened = char(text, pos, OPEN_BRACE)
    if not opened.ok:
        return opened
    body = _HEX_RUN_RE.match(text, opened.position)
    closed = char(text, body.end(), CLOSE_BRACE)
    if not closed.ok:
        return closed
    if not _GUID_BODY_RE.fullmatch(body.group(0)):
        return fail(text, opened.position, "a 128-bit identifier")
    return Success(uuid.UUID(body.group(0)), closed.position)


def parse_quoted(inner: Parser) -> Parser:
    """Wrap ``inner`` in double quotes."""

    def _parse(text: str, pos: int) -> Success[Any] | Failure:
        opened = char(text, pos, QUOTE)
        if not opened.ok:
            return opened
        value = inner(text, opened.position)
        if not value.ok:
            return value
        closed = char(text, value.position, QUOTE)
        if not closed.ok:
            return closed
        return Success(value.value, closed.position)

    return _parse


def _not_quote(text: str, pos: int) -> Success[str]:
    end = text.find(QUOTE, pos)
    if end == -1:
        end = len(text)
    return Success(text[pos:end], end)


# No escape mechanism: a quoted string cannot contain a double quote
parse_quoted_string: Parser = parse_quoted(_not_quote)


def rest_of_line(text: str, pos: int) -> Success[str]:
    """Text up to the end of the line; the line break is consumed."""
    match = _LINE_END_RE.search(text, pos)
    if match is None:
        return Success(text[pos:], len(text))
    return Success(text[pos:match.start()], match.end())


def chars_until(text: str, pos: int, stop: str) -> Success[str] | Failure:
    """Text up to the next ``stop`` character, which is consumed."""
    end = text.find(stop, pos)
    if end == -1:
        return fail(text, len(text), f"'{stop}'")
    return Success(text[pos:end], end + 1)


def parse_key_value_line(text: str, pos: int) -> Success[tuple[str, str]] | Failure:
    """Parse ``key = value`` on a single line.

    The key is trimmed; the value starts after the blanks following ``=`` and
    runs to the end of the line. Nothing is unquoted or unescaped.
    """
    start = skip_spaces(text, pos)
    line = rest_of_line(text, start)
    line_end = start + len(line.value)
    eq = text.find(EQUALS, start, line_end)
    if eq == -1:
        return fail(text, line_end, f"'{EQUALS}'")
    key = text[start:eq].strip(" \t")
    value_start = skip_blanks(text, eq + 1)
    return Success((key, text[value_start:line_end]), line.position)


def repeat_until(
    text: str,
    pos: int,
    item: Parser,
    terminator: Parser,
) -> Success[list] | Failure:
    """Zero or more ``item`` while ``terminator`` is absent under lookahead.

    The terminator itself is left for the caller to consume.
    """
    items = []
    while not looking_at(terminator, text, pos):
        if skip_spaces(text, pos) == len(text):
            return terminator(text, pos)
        result = item(text, pos)
        if not result.ok:
            return result
        if result.position == pos:
            raise RuntimeError(f"Parser {item!r} made no progress at offset {pos}")
        items.append(result.value)
        pos = result.position
    return Success(items, pos)


def section_header(
    text: str,
    pos: int,
    title: str,
    marker: Parser,
) -> Success[Any] | Failure:
    """Parse ``<title> = <marker>`` and return the marker."""
    head = literal(text, skip_spaces(text, pos), title)
    if not head.ok:
        return head
    eq = char(text, skip_spaces(text, head.position), EQUALS)
    if not eq.ok:
        return eq
    return marker(text, skip_spaces(text, eq.position))


def framed(
    text: str,
    pos: int,
    header: Parser,
    item: Parser,
    footer: Parser,
) -> Success[tuple[Any, list]] | Failure:
    """Header, items until the footer, then the footer."""
    head = header(text, pos)
    if not head.ok:
        return head
    body = repeat_until(text, head.position, item, footer)
    if not body.ok:
        return body
    end = footer(text, body.position)
    if not end.ok:
        return end
    return Success((head.value, body.value), end.position)
