"""
Composite and array literal grammars.

Composite (row) literal: ``(f1,f2,...,fN)``. Fields may be double-quoted; inside
quotes ``""`` and ``\\"`` stand for a literal quote. An empty field is an empty
string. Field order is positional and fixed by the originating type.

Array literal: ``{e1,e2,...}``, optionally prefixed by a dimension decoration
such as ``[1:2]=``. Elements are double-quoted when they contain delimiters,
with backslash escapes; an unquoted ``NULL`` is a null element.

The two grammars nest: an array of composites carries each composite as a
quoted array element, so array unescaping must happen before the composite
parser sees the element.
"""

from __future__ import annotations

from typing import Iterable

from .errors import InvalidFieldCount, MalformedLiteral

_NEEDS_QUOTING = set(',()"\\ \t\n\r')


def parse_composite(text: str, arity: int | None = None, type_name: str = "composite") -> list[str]:
    """
    Split a composite literal into its positional field strings.

    Exactly one leading ``(`` and one trailing ``)`` are stripped. When
    ``arity`` is given, any other field count raises InvalidFieldCount.
    """
    if len(text) < 2 or text[0] != "(" or text[-1] != ")":
        raise MalformedLiteral(f"invalid {type_name} literal {text!r}: expected (...)")

    body = text[1:-1]
    fields: list[str] = []
    buf: list[str] = []
    in_quotes = False
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\":
            if i + 1 >= len(body):
                raise MalformedLiteral(f"invalid {type_name} literal {text!r}: dangling escape")
            buf.append(body[i + 1])
            i += 2
            continue
        if in_quotes:
            if ch == '"':
                if body[i + 1:i + 2] == '"':
                    buf.append('"')
                    i += 2
                    continue
                in_quotes = False
            else:
                buf.append(ch)
        elif ch == '"':
            in_quotes = True
        elif ch == ",":
            fields.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
        i += 1

    if in_quotes:
        raise MalformedLiteral(f"invalid {type_name} literal {text!r}: unterminated quote")
    fields.append("".join(buf))

    if arity is not None and len(fields) != arity:
        raise InvalidFieldCount(type_name, arity, len(fields))
    return fields


def format_composite(fields: Iterable[str]) -> str:
    """Inverse of ``parse_composite``: wrap fields back into a composite literal."""
    parts = []
    for field in fields:
        if field and _NEEDS_QUOTING.intersection(field):
            escaped = field.replace("\\", "\\\\").replace('"', '""')
            parts.append(f'"{escaped}"')
        else:
            parts.append(field)
    return "(" + ",".join(parts) + ")"


def parse_array(text: str) -> list[str | None]:
    """
    Split a one-dimensional array literal into raw element strings.

    Null elements come back as ``None``. Nested (multi-dimensional) arrays are
    rejected.
    """
    if text.startswith("["):
        eq = text.find("=")
        if eq < 0:
            raise MalformedLiteral(f"invalid array literal {text!r}: bad dimension decoration")
        text = text[eq + 1:]

    if len(text) < 2 or text[0] != "{" or text[-1] != "}":
        raise MalformedLiteral(f"invalid array literal {text!r}: expected {{...}}")

    body = text[1:-1]
    if not body.strip():
        return []

    elements: list[str | None] = []
    i = 0
    n = len(body)
    while True:
        while i < n and body[i].isspace():
            i += 1
        if i < n and body[i] == "{":
            raise MalformedLiteral("multi-dimensional arrays are not supported")

        buf: list[str] = []
        if i < n and body[i] == '"':
            i += 1
            closed = False
            while i < n:
                ch = body[i]
                if ch == "\\" and i + 1 < n:
                    buf.append(body[i + 1])
                    i += 2
                    continue
                if ch == '"':
                    closed = True
                    i += 1
                    break
                buf.append(ch)
                i += 1
            if not closed:
                raise MalformedLiteral(f"invalid array literal {text!r}: unterminated quote")
            while i < n and body[i].isspace():
                i += 1
            elements.append("".join(buf))
        else:
            escaped = False
            while i < n and body[i] != ",":
                ch = body[i]
                if ch == '"':
                    raise MalformedLiteral(f"invalid array literal {text!r}: stray quote")
                if ch == "\\" and i + 1 < n:
                    escaped = True
                    buf.append(body[i + 1])
                    i += 2
                    continue
                buf.append(ch)
                i += 1
            element = "".join(buf).strip()
            if not element and not escaped:
                raise MalformedLiteral(f"invalid array literal {text!r}: empty element")
            if not escaped and element.upper() == "NULL":
                elements.append(None)
            else:
                elements.append(element)

        if i >= n:
            break
        if body[i] != ",":
            raise MalformedLiteral(f"invalid array literal {text!r}: expected ',' at {i}")
        i += 1

    return elements
