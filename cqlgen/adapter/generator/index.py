import io

from cqlgen import data
from cqlgen.adapter.cql import ensure_buffer, identifier, qualified, quote_string

__all__ = ("create_index", "drop_index")


def create_index(spec: data.CreateIndexSpec, buf: io.StringIO | None = None, /) -> io.StringIO:
    if not spec.table:
        raise data.InvalidSpecification(statement="CREATE INDEX", reason="a table name is required.")

    if not spec.column:
        raise data.InvalidSpecification(
            statement="CREATE INDEX",
            reason=f"a column to index on {spec.table} is required.",
        )

    col_name = identifier(spec.column)
    if spec.target == data.IndexTarget.VALUES:
        target = col_name
    else:
        target = f"{spec.target.name}({col_name})"

    sql = "CREATE CUSTOM INDEX " if spec.is_custom else "CREATE INDEX "
    if spec.if_not_exists:
        sql += "IF NOT EXISTS "
    if spec.name:
        sql += f"{identifier(spec.name)} "
    sql += f"ON {qualified(spec.keyspace, spec.table)} ({target})"
    if spec.using is not None:
        sql += f" USING {quote_string(spec.using)}"

    buf = ensure_buffer(buf)
    buf.write(sql + ";")
    return buf


def drop_index(spec: data.DropIndexSpec, buf: io.StringIO | None = None, /) -> io.StringIO:
    if not spec.name:
        raise data.InvalidSpecification(statement="DROP INDEX", reason="an index name is required.")

    index_name = qualified(spec.keyspace, spec.name)

    buf = ensure_buffer(buf)
    if spec.if_exists:
        buf.write(f"DROP INDEX IF EXISTS {index_name};")
    else:
        buf.write(f"DROP INDEX {index_name};")
    return buf
