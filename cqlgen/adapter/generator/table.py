from __future__ import annotations

import collections
import io
import operator
import typing

from cqlgen import data
from cqlgen.adapter.cql import ensure_buffer, identifier, qualified
from cqlgen.adapter.options import with_options

__all__ = ("alter_table", "create_table", "drop_table")


def _assemble_create_table(spec: data.CreateTableSpec, buf: io.StringIO, /) -> None:
    _validate_create_table(spec)

    buf.write("CREATE TABLE ")
    if spec.if_not_exists:
        buf.write("IF NOT EXISTS ")
    buf.write(qualified(spec.keyspace, spec.name))
    buf.write(" (")
    buf.write(", ".join(_generate_column_definition(col=col) for col in spec.columns))
    buf.write(", PRIMARY KEY (")
    buf.write(_generate_primary_key(spec))
    buf.write("))")


def _clustering_order(spec: data.CreateTableSpec, /) -> list[str]:
    clustering_cols = _by_ordinal(spec.clustering_key_columns)
    if not any(col.ordering for col in clustering_cols):
        return []

    order_csv = ", ".join(
        f"{identifier(col.name)} {(col.ordering or data.Ordering.ASC).value}"
        for col in clustering_cols
    )
    return [f"CLUSTERING ORDER BY ({order_csv})"]


def _assemble_alter_table(spec: data.AlterTableSpec, buf: io.StringIO, /) -> None:
    if not spec.name:
        raise data.InvalidSpecification(statement="ALTER TABLE", reason="a table name is required.")

    if not spec.has_changes:
        raise data.InvalidSpecification(
            statement="ALTER TABLE",
            reason=f"{spec.name} has no column changes or options to apply.",
        )

    buf.write("ALTER TABLE ")
    buf.write(qualified(spec.keyspace, spec.name))
    if spec.changes:
        buf.write(" ")
        buf.write(", ".join(_generate_column_change(change) for change in spec.changes))


create_table = with_options(_assemble_create_table, leading=_clustering_order)

alter_table = with_options(_assemble_alter_table)


def drop_table(spec: data.DropTableSpec, buf: io.StringIO | None = None, /) -> io.StringIO:
    if not spec.name:
        raise data.InvalidSpecification(statement="DROP TABLE", reason="a table name is required.")

    table_name = qualified(spec.keyspace, spec.name)

    buf = ensure_buffer(buf)
    if spec.if_exists:
        buf.write(f"DROP TABLE IF EXISTS {table_name};")
    else:
        buf.write(f"DROP TABLE {table_name};")
    return buf


def _by_ordinal(cols: typing.Iterable[data.Column], /) -> list[data.Column]:
    return sorted(cols, key=operator.attrgetter("ordinal"))


def _generate_column_change(change: data.ColumnChange, /) -> str:
    return {
        data.AddColumn: lambda: f"ADD {identifier(change.name)} {data.render_type(change.data_type)}",
        data.AlterColumn: lambda: f"ALTER {identifier(change.name)} TYPE {data.render_type(change.data_type)}",
        data.DropColumn: lambda: f"DROP {identifier(change.name)}",
    }[type(change)]()


def _generate_column_definition(*, col: data.Column) -> str:
    return f"{identifier(col.name)} {data.render_type(col.data_type)}"


def _generate_primary_key(spec: data.CreateTableSpec, /) -> str:
    partition_cols = [identifier(col.name) for col in _by_ordinal(spec.partition_key_columns)]
    clustering_cols = [identifier(col.name) for col in _by_ordinal(spec.clustering_key_columns)]

    if len(partition_cols) > 1:
        partition_key = "(" + ", ".join(partition_cols) + ")"
    else:
        partition_key = partition_cols[0]

    return ", ".join([partition_key, *clustering_cols])


def _validate_create_table(spec: data.CreateTableSpec, /) -> None:
    if not spec.name:
        raise data.InvalidSpecification(statement="CREATE TABLE", reason="a table name is required.")

    if not spec.columns:
        raise data.InvalidSpecification(
            statement="CREATE TABLE",
            reason=f"{spec.name} must have at least one column.",
        )

    duplicates = sorted(
        name for name, ct in collections.Counter(col.name for col in spec.columns).items() if ct > 1
    )
    if duplicates:
        raise data.InvalidSpecification(
            statement="CREATE TABLE",
            reason=f"{spec.name} declares the following columns more than once: {', '.join(duplicates)}.",
        )

    if not spec.partition_key_columns:
        raise data.InvalidSpecification(
            statement="CREATE TABLE",
            reason=f"{spec.name} must have at least one partition key column.",
        )

    for col in spec.columns:
        if col.ordering is not None and not col.is_clustering_key:
            raise data.InvalidSpecification(
                statement="CREATE TABLE",
                reason=f"{col.name} declares an ordering, but only clustering key columns can be ordered.",
            )

    for key_type, cols in (
        (data.KeyType.PARTITION, spec.partition_key_columns),
        (data.KeyType.CLUSTERING, spec.clustering_key_columns),
    ):
        ordinals = sorted(col.ordinal for col in cols if col.ordinal is not None)
        if len(ordinals) != len(cols) or ordinals != list(range(1, len(cols) + 1)):
            raise data.InvalidSpecification(
                statement="CREATE TABLE",
                reason=(
                    f"the {key_type.value} key ordinals of {spec.name} must run from 1 to {len(cols)} "
                    f"without gaps or repeats, but got {[col.ordinal for col in cols]}."
                ),
            )
