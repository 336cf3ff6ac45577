import dataclasses

from frozendict import frozendict

from cqlgen.data.option import Options

__all__ = ("AlterKeyspaceSpec", "CreateKeyspaceSpec", "DropKeyspaceSpec")


@dataclasses.dataclass(frozen=True, kw_only=True)
class CreateKeyspaceSpec:
    name: str | None
    if_not_exists: bool = False
    options: Options = dataclasses.field(default_factory=frozendict)


@dataclasses.dataclass(frozen=True, kw_only=True)
class AlterKeyspaceSpec:
    name: str | None
    options: Options = dataclasses.field(default_factory=frozendict)


@dataclasses.dataclass(frozen=True, kw_only=True)
class DropKeyspaceSpec:
    name: str | None
    if_exists: bool = False
