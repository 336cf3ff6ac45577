import pathlib
import typing

import pytest

from cqlgen import adapter, data
from cqlgen.adapter.generator import cql


def test_load(schema_file_fixture: pathlib.Path, events_table_fixture: data.CreateTableSpec):
    schema = adapter.schema_file.load(schema_file=schema_file_fixture)
    assert not isinstance(schema, data.Error), str(schema)

    assert schema.keyspace is not None
    assert schema.keyspace.name == "events"
    assert schema.keyspace.if_not_exists

    assert len(schema.tables) == 1
    table = schema.tables[0]
    assert table.keyspace == "events"
    assert table.columns == events_table_fixture.columns
    assert list(table.options.keys()) == ["comment", "gc_grace_seconds"]
    assert table.options["gc_grace_seconds"].kind == data.OptionKind.NUMBER

    assert schema.indexes == (
        data.CreateIndexSpec(
            name="event_by_source_kind_idx",
            table="event_by_source",
            column="kind",
            keyspace="events",
        ),
    )


def test_load_missing_file(tmp_path: pathlib.Path):
    result = adapter.schema_file.load(schema_file=tmp_path / "missing.json")
    assert isinstance(result, data.Error)
    assert "does not exist" in result.message


def test_load_malformed_json(tmp_path: pathlib.Path):
    fp = tmp_path / "schema.json"
    fp.write_text("{not json")
    assert isinstance(adapter.schema_file.load(schema_file=fp), data.Error)


def test_parse_tables_without_keyspace():
    schema = adapter.schema_file.parse(
        {
            "tables": [
                {
                    "name": "t",
                    "keyspace": "other",
                    "columns": [{"name": "p", "type": "int", "key": "PARTITION"}],
                    "options": {"COMPACT STORAGE": None, "custom_option": "x"},
                }
            ]
        }
    )
    assert not isinstance(schema, data.Error), str(schema)
    assert schema.keyspace is None
    assert schema.tables[0].keyspace == "other"
    assert schema.tables[0].options["COMPACT STORAGE"].kind == data.OptionKind.FLAG
    assert schema.tables[0].options["custom_option"].kind == data.OptionKind.STRING


def test_parse_index_target():
    schema = adapter.schema_file.parse(
        {"indexes": [{"table": "users", "column": "prefs", "target": "KEYS", "keyspace": "ks"}]}
    )
    assert not isinstance(schema, data.Error), str(schema)
    assert schema.indexes[0].target == data.IndexTarget.KEYS
    assert schema.indexes[0].name is None


@pytest.mark.parametrize(
    "d, message",
    [
        ({}, "must declare"),
        ({"keyspace": {"replication": {}}}, "'name'"),
        ({"tables": [{"columns": [{"name": "p", "type": "int"}]}]}, "'name'"),
        ({"tables": [{"name": "t"}]}, "'columns'"),
        ({"tables": [{"name": "t", "columns": [{"type": "int"}]}]}, "'name'"),
        ({"tables": [{"name": "t", "columns": [{"name": "p"}]}]}, "'type'"),
        ({"tables": [{"name": "t", "columns": [{"name": "p", "type": "integer"}]}]}, "invalid type"),
        ({"tables": [{"name": "t", "columns": [{"name": "p", "type": "int", "key": "primary"}]}]}, "invalid key"),
        (
            {
                "tables": [
                    {
                        "name": "t",
                        "columns": [{"name": "c", "type": "int", "key": "clustering", "ordering": "up"}],
                    }
                ]
            },
            "invalid ordering",
        ),
        ({"indexes": [{"column": "email"}]}, "'table'"),
        ({"indexes": [{"table": "users"}]}, "'column'"),
        ({"indexes": [{"table": "users", "column": "email", "target": "everything"}]}, "invalid target"),
        ({"keyspace": {"name": "ks", "if-not-exists": "false"}}, "'if-not-exists'"),
        ({"keyspace": {"name": "ks", "durable-writes": "yes"}}, "'durable-writes'"),
        (
            {"tables": [{"name": "t", "if-not-exists": 1, "columns": [{"name": "p", "type": "int"}]}]},
            "'if-not-exists'",
        ),
        (
            {"tables": [{"name": "t", "columns": [{"name": "p", "type": "int", "key": "partition", "ordinal": "1"}]}]},
            "invalid ordinal",
        ),
        ({"indexes": [{"table": "users", "column": "email", "if-not-exists": "true"}]}, "'if-not-exists'"),
        ({"tables": [{"name": "t", "columns": [{"name": "p", "type": "int"}], "options": {"a b": 1}}]}, "option name"),
    ],
)
def test_parse_errors(d: dict[str, typing.Any], message: str):
    result = adapter.schema_file.parse(d)
    assert isinstance(result, data.Error)
    assert message in result.message


def test_parse_accepts_numeric_strings_for_number_options():
    schema = adapter.schema_file.parse(
        {
            "tables": [
                {
                    "name": "t",
                    "columns": [{"name": "p", "type": "int", "key": "partition"}],
                    "options": {"gc_grace_seconds": "864000"},
                }
            ]
        }
    )
    assert not isinstance(schema, data.Error), str(schema)
    assert cql(schema.tables[0]) == "CREATE TABLE t (p int, PRIMARY KEY (p)) WITH gc_grace_seconds = 864000;"
