import io
import re
import typing

from cassandra.metadata import cql_keywords_reserved

from cqlgen import data

__all__ = ("ensure_buffer", "identifier", "qualified", "quote_string")

_UNQUOTED_IDENTIFIER: typing.Final[re.Pattern[str]] = re.compile(r"[a-z][a-z0-9_]*")


def ensure_buffer(buf: io.StringIO | None = None, /) -> io.StringIO:
    if buf is None:
        return io.StringIO()
    return buf


def identifier(name: str | None, /) -> str:
    """Render a table, keyspace, column or index name.

    Lower-case names made of ``[a-z0-9_]`` pass through unchanged.  Anything
    else (mixed case, other characters, reserved words) is double-quoted, with
    embedded double quotes doubled.

    >>> identifier("customer_id")
    'customer_id'
    >>> identifier("CustomerId")
    '"CustomerId"'
    """
    if not name:
        raise data.InvalidIdentifier(name=name)

    if _UNQUOTED_IDENTIFIER.fullmatch(name) and name not in cql_keywords_reserved:
        return name

    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def qualified(keyspace: str | None, name: str | None, /) -> str:
    if keyspace:
        return f"{identifier(keyspace)}.{identifier(name)}"
    return identifier(name)


def quote_string(value: str, /) -> str:
    escaped = value.replace("'", "''")
    return f"'{escaped}'"
