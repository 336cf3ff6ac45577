import pytest

from cqlgen import data
from cqlgen.adapter.generator import alter_keyspace, cql, create_keyspace, drop_keyspace


def test_create_keyspace_without_options():
    assert cql(data.CreateKeyspaceBuilder("ks1").build()) == "CREATE KEYSPACE ks1;"


def test_create_keyspace_with_options():
    spec = (
        data.CreateKeyspaceBuilder("ks1")
        .if_not_exists()
        .replication(data.simple_strategy(3))
        .durable_writes(False)
        .build()
    )
    assert cql(spec) == (
        "CREATE KEYSPACE IF NOT EXISTS ks1 "
        "WITH replication = {'class': 'SimpleStrategy', 'replication_factor': 3} AND durable_writes = false;"
    )


def test_create_keyspace_with_network_topology_strategy():
    spec = data.CreateKeyspaceBuilder("ks1").replication(data.network_topology_strategy({"dc1": 3, "dc2": 2})).build()
    assert cql(spec) == (
        "CREATE KEYSPACE ks1 WITH replication = {'class': 'NetworkTopologyStrategy', 'dc1': 3, 'dc2': 2};"
    )


def test_create_keyspace_keeps_last_value_of_repeated_option():
    spec = data.CreateKeyspaceBuilder("ks1").durable_writes(True).durable_writes(False).build()
    assert cql(spec) == "CREATE KEYSPACE ks1 WITH durable_writes = false;"


def test_create_keyspace_without_name_is_invalid():
    with pytest.raises(data.InvalidSpecification, match="keyspace name is required"):
        create_keyspace(data.CreateKeyspaceBuilder().build())


def test_alter_keyspace():
    spec = data.AlterKeyspaceBuilder("ks1").durable_writes(True).build()
    assert cql(spec) == "ALTER KEYSPACE ks1 WITH durable_writes = true;"


def test_alter_keyspace_without_options_is_invalid():
    with pytest.raises(data.InvalidSpecification, match="no options"):
        alter_keyspace(data.AlterKeyspaceBuilder("ks1").build())


def test_drop_keyspace():
    assert cql(data.DropKeyspaceSpec(name="ks1")) == "DROP KEYSPACE ks1;"
    assert cql(data.DropKeyspaceSpec(name="ks1", if_exists=True)) == "DROP KEYSPACE IF EXISTS ks1;"


def test_drop_keyspace_without_name_is_invalid():
    with pytest.raises(data.InvalidSpecification):
        drop_keyspace(data.DropKeyspaceSpec(name=""))
