import contextlib
import typing

import keyring
from cassandra.auth import PlainTextAuthProvider
from loguru import logger

from cqlgen import data

__all__ = ("CassandraSessionProvider",)


class CassandraSessionProvider(data.SessionProvider):
    def __init__(self, *, cluster_config: data.ClusterConfig):
        self._cluster_config: typing.Final[data.ClusterConfig] = cluster_config

    @contextlib.contextmanager
    def open(self) -> typing.Generator[data.Session | data.Error, None, None]:
        # the driver picks its event loop when cassandra.cluster is imported
        from cassandra.cluster import Cluster

        cluster: Cluster | None = None
        try:
            auth_provider: PlainTextAuthProvider | None = None
            if self._cluster_config.keyring_username_entry and self._cluster_config.keyring_password_entry:
                username = keyring.get_password("system", self._cluster_config.keyring_username_entry)
                password = keyring.get_password("system", self._cluster_config.keyring_password_entry)
                auth_provider = PlainTextAuthProvider(username=username, password=password)

            kwargs: dict[str, typing.Any] = {}
            if self._cluster_config.protocol_version is not None:
                kwargs["protocol_version"] = self._cluster_config.protocol_version

            cluster = Cluster(
                contact_points=list(self._cluster_config.contact_points),
                port=self._cluster_config.port,
                auth_provider=auth_provider,
                **kwargs,
            )
            session = cluster.connect(self._cluster_config.keyspace)
        except Exception as e:
            logger.error(f"An error occurred while connecting to {self._cluster_config!r}: {e!s}")
            if cluster is not None:
                cluster.shutdown()
            yield data.Error.new(
                "An error occurred while connecting to the cluster.",
                cluster=self._cluster_config.name,
            )
        else:
            try:
                yield session
            finally:
                cluster.shutdown()
