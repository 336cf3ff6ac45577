import io

from cqlgen import data
from cqlgen.adapter.cql import ensure_buffer, identifier
from cqlgen.adapter.options import with_options

__all__ = ("alter_keyspace", "create_keyspace", "drop_keyspace")


def _assemble_create_keyspace(spec: data.CreateKeyspaceSpec, buf: io.StringIO, /) -> None:
    if not spec.name:
        raise data.InvalidSpecification(statement="CREATE KEYSPACE", reason="a keyspace name is required.")

    buf.write("CREATE KEYSPACE ")
    if spec.if_not_exists:
        buf.write("IF NOT EXISTS ")
    buf.write(identifier(spec.name))


def _assemble_alter_keyspace(spec: data.AlterKeyspaceSpec, buf: io.StringIO, /) -> None:
    if not spec.name:
        raise data.InvalidSpecification(statement="ALTER KEYSPACE", reason="a keyspace name is required.")

    if not spec.options:
        raise data.InvalidSpecification(
            statement="ALTER KEYSPACE",
            reason=f"{spec.name} has no options to change.",
        )

    buf.write("ALTER KEYSPACE ")
    buf.write(identifier(spec.name))


create_keyspace = with_options(_assemble_create_keyspace)

alter_keyspace = with_options(_assemble_alter_keyspace)


def drop_keyspace(spec: data.DropKeyspaceSpec, buf: io.StringIO | None = None, /) -> io.StringIO:
    if not spec.name:
        raise data.InvalidSpecification(statement="DROP KEYSPACE", reason="a keyspace name is required.")

    keyspace_name = identifier(spec.name)

    buf = ensure_buffer(buf)
    if spec.if_exists:
        buf.write(f"DROP KEYSPACE IF EXISTS {keyspace_name};")
    else:
        buf.write(f"DROP KEYSPACE {keyspace_name};")
    return buf
