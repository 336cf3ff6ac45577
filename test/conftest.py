import contextlib
import json
import pathlib
import typing

import pytest
from loguru import logger

from cqlgen import adapter, data


class FakeSession:
    def __init__(self, *, fail_on: str | None = None):
        self.executed: list[str] = []
        self._fail_on = fail_on

    def execute(self, query: str, /) -> None:
        if self._fail_on is not None and self._fail_on in query:
            raise RuntimeError(f"Simulated failure on {query}")
        self.executed.append(query)


class FakeSessionProvider(data.SessionProvider):
    def __init__(self, *, session: FakeSession | None = None, error: data.Error | None = None):
        self.session = session or FakeSession()
        self._error = error
        self.opened = 0

    @contextlib.contextmanager
    def open(self) -> typing.Generator[data.Session | data.Error, None, None]:
        self.opened += 1
        if self._error is not None:
            yield self._error
        else:
            yield self.session


@pytest.fixture(scope="function")
def session_provider_fixture() -> FakeSessionProvider:
    return FakeSessionProvider()


@pytest.fixture(scope="function")
def failing_session_provider_fixture() -> FakeSessionProvider:
    return FakeSessionProvider(session=FakeSession(fail_on="CREATE TABLE"))


@pytest.fixture(scope="function")
def unreachable_session_provider_fixture() -> FakeSessionProvider:
    return FakeSessionProvider(error=data.Error.new("An error occurred while connecting to the cluster."))


@pytest.fixture(scope="function")
def events_table_fixture() -> data.CreateTableSpec:
    return (
        data.TableBuilder("event_by_source", keyspace="events")
        .if_not_exists()
        .partition_key_column("source_id", data.DataType.UUID)
        .clustering_key_column("occurred_at", data.DataType.Timestamp, ordering=data.Ordering.DESC)
        .clustering_key_column("event_id", data.DataType.TimeUUID)
        .column("kind", data.DataType.Text)
        .column("payload", data.CollectionType.map_of(data.DataType.Text, data.DataType.Text))
        .with_option(data.TableOption.COMMENT, "events by source")
        .build()
    )


@pytest.fixture(scope="function")
def schema_dict_fixture() -> dict[str, typing.Any]:
    return {
        "keyspace": {
            "name": "events",
            "if-not-exists": True,
            "replication": {"class": "SimpleStrategy", "replication_factor": 1},
            "durable-writes": True,
        },
        "tables": [
            {
                "name": "event_by_source",
                "if-not-exists": True,
                "columns": [
                    {"name": "source_id", "type": "uuid", "key": "partition"},
                    {"name": "occurred_at", "type": "timestamp", "key": "clustering", "ordering": "desc"},
                    {"name": "event_id", "type": "timeuuid", "key": "clustering"},
                    {"name": "kind", "type": "text"},
                    {"name": "payload", "type": "map<text, text>"},
                ],
                "options": {"comment": "events by source", "gc_grace_seconds": 3600},
            }
        ],
        "indexes": [
            {"name": "event_by_source_kind_idx", "table": "event_by_source", "column": "kind"},
        ],
    }


@pytest.fixture(scope="function")
def schema_file_fixture(tmp_path: pathlib.Path, schema_dict_fixture: dict[str, typing.Any]) -> pathlib.Path:
    fp = tmp_path / "schema.json"
    with fp.open("w") as fh:
        json.dump(schema_dict_fixture, fh)
    return fp


@pytest.fixture(scope="function")
def config_file_fixture(tmp_path: pathlib.Path) -> pathlib.Path:
    fp = tmp_path / "config.json"
    with fp.open("w") as fh:
        json.dump(
            {
                "clusters": [
                    {
                        "name": "local",
                        "contact-points": ["127.0.0.1"],
                        "port": 9042,
                        "keyspace": None,
                        "keyring-username-entry": None,
                        "keyring-password-entry": None,
                    }
                ]
            },
            fh,
        )
    return fp


@pytest.fixture(scope="function")
def cqlgen_home_fixture(
    tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch
) -> typing.Generator[pathlib.Path, None, None]:
    monkeypatch.setenv(adapter.fs.HOME_ENV_VAR, str(tmp_path))
    adapter.fs._root_dir.cache_clear()  # noqa
    yield tmp_path
    adapter.fs._root_dir.cache_clear()  # noqa
    logger.remove()
