import io
import typing

from loguru import logger

from cqlgen import data
from cqlgen.adapter.generator.index import create_index, drop_index
from cqlgen.adapter.generator.keyspace import alter_keyspace, create_keyspace, drop_keyspace
from cqlgen.adapter.generator.table import alter_table, create_table, drop_table

__all__ = ("Spec", "cql", "to_cql")

Spec: typing.TypeAlias = (
    data.CreateTableSpec
    | data.AlterTableSpec
    | data.DropTableSpec
    | data.CreateKeyspaceSpec
    | data.AlterKeyspaceSpec
    | data.DropKeyspaceSpec
    | data.CreateIndexSpec
    | data.DropIndexSpec
)

_GENERATORS: typing.Final[dict[type, typing.Callable[..., io.StringIO]]] = {
    data.CreateTableSpec: create_table,
    data.AlterTableSpec: alter_table,
    data.DropTableSpec: drop_table,
    data.CreateKeyspaceSpec: create_keyspace,
    data.AlterKeyspaceSpec: alter_keyspace,
    data.DropKeyspaceSpec: drop_keyspace,
    data.CreateIndexSpec: create_index,
    data.DropIndexSpec: drop_index,
}


def to_cql(spec: Spec, buf: io.StringIO | None = None, /) -> io.StringIO:
    generator = _GENERATORS.get(type(spec))
    if generator is None:
        raise TypeError(f"No CQL generator is registered for {type(spec).__name__}.")

    return generator(spec, buf)


def cql(spec: Spec, /) -> str:
    statement = to_cql(spec).getvalue()
    logger.debug(f"Generated CQL: {statement}")
    return statement
