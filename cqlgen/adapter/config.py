import functools
import json
import pathlib
import typing

import pydantic

from cqlgen import data

__all__ = ("load",)


@functools.lru_cache(maxsize=1)
def load(*, config_file: pathlib.Path) -> data.Config | data.Error:
    try:
        if not config_file.exists():
            return data.Error.new(
                f"The config file specified, {config_file.resolve()!s}, does not exist.",
                config_file=config_file,
            )

        with config_file.open("r") as fh:
            d = typing.cast(dict[str, typing.Any], json.load(fh))

        if "clusters" not in d.keys():
            return data.Error.new("config file is missing an entry for 'clusters'.")

        clusters: list[data.ClusterConfig] = []
        for cluster_dict in d["clusters"]:
            cluster = _parse_cluster_dict(cluster_dict)
            if isinstance(cluster, data.Error):
                return cluster

            clusters.append(cluster)

        return data.Config(clusters=tuple(clusters))
    except Exception as e:
        return data.Error.new(
            f"An error occurred while loading the config file: {e!s}",
            config_file=config_file,
        )


def _parse_cluster_dict(cluster_dict: dict[str, typing.Any], /) -> data.ClusterConfig | data.Error:
    try:
        if "name" not in cluster_dict.keys():
            return data.Error.new("cluster entry in config file is missing an entry for 'name'.")

        name: typing.Final[str] = cluster_dict["name"]

        if "contact-points" not in cluster_dict.keys():
            return data.Error.new(
                f"cluster entry, {name}, in config file is missing an entry for 'contact-points'."
            )

        contact_points: typing.Final[tuple[str, ...]] = tuple(cluster_dict["contact-points"])
        if not contact_points:
            return data.Error.new(f"cluster entry, {name}, must list at least one contact point.")

        port: typing.Final[int] = int(cluster_dict.get("port", 9042))

        keyspace: typing.Final[str | None] = cluster_dict.get("keyspace")

        keyring_username_entry: typing.Final[str | None] = cluster_dict.get("keyring-username-entry")

        keyring_password_entry: typing.Final[str | None] = cluster_dict.get("keyring-password-entry")

        if (keyring_username_entry is None) != (keyring_password_entry is None):
            return data.Error.new(
                f"cluster entry, {name}, must provide both keyring-username-entry and "
                "keyring-password-entry, or neither."
            )

        protocol_version: typing.Final[int | None] = cluster_dict.get("protocol-version")

        return data.ClusterConfig(
            name=name,
            contact_points=contact_points,
            port=port,
            keyspace=keyspace,
            keyring_username_entry=keyring_username_entry,
            keyring_password_entry=keyring_password_entry,
            protocol_version=protocol_version,
        )
    except pydantic.ValidationError as e:
        return data.Error.new(f"cluster entry in config file is invalid: {e!s}")
    except Exception as e:
        return data.Error.new(f"An error occurred while parsing cluster from json: {e!s}")
