import re
import typing

from cqlgen import data

__all__ = ("parse",)

_TOKEN: typing.Final[re.Pattern[str]] = re.compile(r"\s*([A-Za-z_][A-Za-z0-9_]*|<|>|,)")

_NATIVE_TYPES: typing.Final[dict[str, data.DataType]] = {dt.value: dt for dt in data.DataType}


def parse(text: str, /) -> data.TypeLike:
    """Parse a CQL type such as ``text`` or ``map<text, frozen<list<int>>>``."""
    tokens = _tokenize(text)
    data_type, pos = _parse_type(tokens, 0, text=text)
    if pos != len(tokens):
        raise ValueError(f"Unexpected {tokens[pos]!r} at the end of the type, {text!r}.")
    return data_type


def _tokenize(text: str, /) -> list[str]:
    tokens: list[str] = []
    pos = 0
    stripped = text.rstrip()
    while pos < len(stripped):
        match = _TOKEN.match(stripped, pos)
        if match is None:
            raise ValueError(f"Could not parse the type, {text!r}, at position {pos}.")
        tokens.append(match.group(1))
        pos = match.end()
    if not tokens:
        raise ValueError("A type name is required, but got an empty string.")
    return tokens


def _parse_type(tokens: list[str], pos: int, /, *, text: str) -> tuple[data.TypeLike, int]:
    if pos >= len(tokens):
        raise ValueError(f"The type, {text!r}, ended unexpectedly.")

    name = tokens[pos].lower()
    pos += 1

    if pos < len(tokens) and tokens[pos] == "<":
        args: list[data.TypeLike] = []
        while True:
            arg, pos = _parse_type(tokens, pos + 1, text=text)
            args.append(arg)
            if pos >= len(tokens):
                raise ValueError(f"The type, {text!r}, is missing a closing '>'.")
            if tokens[pos] == ">":
                pos += 1
                break
            if tokens[pos] != ",":
                raise ValueError(f"Expected ',' or '>' in the type, {text!r}, but got {tokens[pos]!r}.")
        return data.CollectionType(kind=name, args=tuple(args)), pos

    if name not in _NATIVE_TYPES:
        raise ValueError(f"{name!r} is not a recognized CQL type.")

    return _NATIVE_TYPES[name], pos
