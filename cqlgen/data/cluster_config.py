import pydantic

__all__ = ("ClusterConfig",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(strict=True))
class ClusterConfig:
    name: str
    contact_points: tuple[str, ...]
    port: pydantic.PositiveInt
    keyspace: str | None
    keyring_username_entry: str | None
    keyring_password_entry: str | None
    protocol_version: pydantic.PositiveInt | None

    def __repr__(self) -> str:
        return f"ClusterConfig(name={self.name!r}, contact_points={self.contact_points!r}, port={self.port})"
