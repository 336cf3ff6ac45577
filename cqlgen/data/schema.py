import dataclasses

from cqlgen.data.index_spec import CreateIndexSpec
from cqlgen.data.keyspace_spec import CreateKeyspaceSpec
from cqlgen.data.table_spec import CreateTableSpec

__all__ = ("Schema",)


@dataclasses.dataclass(frozen=True, kw_only=True)
class Schema:
    keyspace: CreateKeyspaceSpec | None
    tables: tuple[CreateTableSpec, ...]
    indexes: tuple[CreateIndexSpec, ...]
