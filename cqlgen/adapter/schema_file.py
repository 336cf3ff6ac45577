import json
import pathlib
import typing

from cqlgen import data
from cqlgen.adapter import type_parser

__all__ = ("load", "parse")

_KEY_TYPES: typing.Final[dict[str, data.KeyType]] = {kt.value: kt for kt in data.KeyType}

_ORDERINGS: typing.Final[dict[str, data.Ordering]] = {o.value.lower(): o for o in data.Ordering}

_INDEX_TARGETS: typing.Final[dict[str, data.IndexTarget]] = {t.value: t for t in data.IndexTarget}


def load(*, schema_file: pathlib.Path) -> data.Schema | data.Error:
    try:
        if not schema_file.exists():
            return data.Error.new(
                f"The schema file specified, {schema_file.resolve()!s}, does not exist.",
                schema_file=schema_file,
            )

        with schema_file.open("r") as fh:
            d = typing.cast(dict[str, typing.Any], json.load(fh))

        return parse(d)
    except Exception as e:
        return data.Error.new(
            f"An error occurred while loading the schema file: {e!s}",
            schema_file=schema_file,
        )


def parse(d: dict[str, typing.Any], /) -> data.Schema | data.Error:
    try:
        keyspace: data.CreateKeyspaceSpec | None = None
        if d.get("keyspace") is not None:
            keyspace_or_error = _parse_keyspace_dict(d["keyspace"])
            if isinstance(keyspace_or_error, data.Error):
                return keyspace_or_error
            keyspace = keyspace_or_error

        default_keyspace = keyspace.name if keyspace else None

        tables: list[data.CreateTableSpec] = []
        for table_dict in d.get("tables", []):
            table = _parse_table_dict(table_dict, default_keyspace=default_keyspace)
            if isinstance(table, data.Error):
                return table

            tables.append(table)

        indexes: list[data.CreateIndexSpec] = []
        for index_dict in d.get("indexes", []):
            index = _parse_index_dict(index_dict, default_keyspace=default_keyspace)
            if isinstance(index, data.Error):
                return index

            indexes.append(index)

        if keyspace is None and not tables and not indexes:
            return data.Error.new("schema file must declare a 'keyspace', 'tables', or 'indexes'.")

        return data.Schema(keyspace=keyspace, tables=tuple(tables), indexes=tuple(indexes))
    except Exception as e:
        return data.Error.new(f"An error occurred while parsing the schema: {e!s}")


def _parse_keyspace_dict(keyspace_dict: dict[str, typing.Any], /) -> data.CreateKeyspaceSpec | data.Error:
    if "name" not in keyspace_dict.keys():
        return data.Error.new("keyspace entry in schema file is missing an entry for 'name'.")

    builder = data.CreateKeyspaceBuilder(keyspace_dict["name"])
    if_not_exists = keyspace_dict.get("if-not-exists", False)
    if not isinstance(if_not_exists, bool):
        return data.Error.new(
            f"keyspace entry, {keyspace_dict['name']}, has an invalid value for 'if-not-exists', {if_not_exists!r}; "
            "expected true or false."
        )
    builder.if_not_exists(if_not_exists)

    if keyspace_dict.get("replication") is not None:
        builder.replication(keyspace_dict["replication"])

    durable_writes = keyspace_dict.get("durable-writes")
    if durable_writes is not None:
        if not isinstance(durable_writes, bool):
            return data.Error.new(
                f"keyspace entry, {keyspace_dict['name']}, has an invalid value for 'durable-writes', "
                f"{durable_writes!r}; expected true or false."
            )
        builder.durable_writes(durable_writes)

    for option_name, value in keyspace_dict.get("options", {}).items():
        builder.with_option(option_name, value)

    return builder.build()


def _parse_table_dict(
    table_dict: dict[str, typing.Any],
    /,
    *,
    default_keyspace: str | None,
) -> data.CreateTableSpec | data.Error:
    if "name" not in table_dict.keys():
        return data.Error.new("table entry in schema file is missing an entry for 'name'.")

    table_name: typing.Final[str] = table_dict["name"]

    if not table_dict.get("columns"):
        return data.Error.new(f"table entry, {table_name}, is missing an entry for 'columns'.")

    builder = data.TableBuilder(table_name, keyspace=table_dict.get("keyspace", default_keyspace))
    if_not_exists = table_dict.get("if-not-exists", False)
    if not isinstance(if_not_exists, bool):
        return data.Error.new(
            f"table entry, {table_name}, has an invalid value for 'if-not-exists', {if_not_exists!r}; "
            "expected true or false."
        )
    builder.if_not_exists(if_not_exists)

    for column_dict in table_dict["columns"]:
        if "name" not in column_dict.keys():
            return data.Error.new(f"a column entry of {table_name} is missing an entry for 'name'.")

        col_name: str = column_dict["name"]

        if "type" not in column_dict.keys():
            return data.Error.new(f"column entry, {table_name}.{col_name}, is missing an entry for 'type'.")

        try:
            data_type = type_parser.parse(column_dict["type"])
        except ValueError as e:
            return data.Error.new(f"column entry, {table_name}.{col_name}, has an invalid type: {e!s}")

        key = column_dict.get("key")
        ordinal: int | None = column_dict.get("ordinal")
        if ordinal is not None and (isinstance(ordinal, bool) or not isinstance(ordinal, int)):
            return data.Error.new(
                f"column entry, {table_name}.{col_name}, has an invalid ordinal, {ordinal!r}; expected an integer."
            )

        if key is None:
            builder.column(col_name, data_type)
        elif key.lower() not in _KEY_TYPES:
            return data.Error.new(
                f"column entry, {table_name}.{col_name}, has an invalid key, {key!r}; "
                f"expected one of {', '.join(_KEY_TYPES)}."
            )
        elif _KEY_TYPES[key.lower()] == data.KeyType.PARTITION:
            builder.partition_key_column(col_name, data_type, ordinal=ordinal)
        else:
            ordering_name = column_dict.get("ordering")
            if ordering_name is not None and ordering_name.lower() not in _ORDERINGS:
                return data.Error.new(
                    f"column entry, {table_name}.{col_name}, has an invalid ordering, {ordering_name!r}."
                )
            builder.clustering_key_column(
                col_name,
                data_type,
                ordering=_ORDERINGS[ordering_name.lower()] if ordering_name else None,
                ordinal=ordinal,
            )

    for option_name, value in table_dict.get("options", {}).items():
        builder.with_option(option_name, value)

    return builder.build()


def _parse_index_dict(
    index_dict: dict[str, typing.Any],
    /,
    *,
    default_keyspace: str | None,
) -> data.CreateIndexSpec | data.Error:
    for entry in ("table", "column"):
        if entry not in index_dict.keys():
            return data.Error.new(f"index entry in schema file is missing an entry for '{entry}'.")

    target_name: str = index_dict.get("target", data.IndexTarget.VALUES.value)
    if target_name.lower() not in _INDEX_TARGETS:
        return data.Error.new(
            f"index entry on {index_dict['table']} has an invalid target, {target_name!r}; "
            f"expected one of {', '.join(_INDEX_TARGETS)}."
        )

    if_not_exists = index_dict.get("if-not-exists", False)
    if not isinstance(if_not_exists, bool):
        return data.Error.new(
            f"index entry on {index_dict['table']} has an invalid value for 'if-not-exists', {if_not_exists!r}; "
            "expected true or false."
        )

    return data.CreateIndexSpec(
        name=index_dict.get("name"),
        table=index_dict["table"],
        column=index_dict["column"],
        keyspace=index_dict.get("keyspace", default_keyspace),
        if_not_exists=if_not_exists,
        target=_INDEX_TARGETS[target_name.lower()],
        using=index_dict.get("using"),
    )
