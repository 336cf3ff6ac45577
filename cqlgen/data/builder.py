"""Fluent builders for the immutable specifications.

The mutators only reject ``None`` arguments and malformed option names.
Structural problems such as a table without a partition key are reported by
the generators, so a builder can be filled in any order and rendered once
complete.  Unknown option names are lower-cased, as CQL treats them
case-insensitively.
"""
from __future__ import annotations

import re
import typing

from frozendict import frozendict

from cqlgen.data.column import Column
from cqlgen.data.data_type import TypeLike
from cqlgen.data.key_type import KeyType, Ordering
from cqlgen.data.keyspace_spec import AlterKeyspaceSpec, CreateKeyspaceSpec
from cqlgen.data.option import KeyspaceOption, Option, TableOption
from cqlgen.data.table_spec import (
    AddColumn,
    AlterColumn,
    AlterTableSpec,
    ColumnChange,
    CreateTableSpec,
    DropColumn,
)

__all__ = (
    "AlterKeyspaceBuilder",
    "AlterTableBuilder",
    "CreateKeyspaceBuilder",
    "TableBuilder",
)

Self = typing.TypeVar("Self", bound="_OptionsBuilder")

_OPTION_NAME: typing.Final[re.Pattern[str]] = re.compile(r"[a-z][a-z0-9_]*")


def _require(value: typing.Any, /, *, arg: str) -> None:
    if value is None:
        raise ValueError(f"{arg} is required.")


class _OptionsBuilder:
    _option_type: typing.ClassVar[type[TableOption] | type[KeyspaceOption]]

    def __init__(self, name: str | None = None):
        self._name = name
        self._options: dict[str, Option] = {}

    def name(self: Self, name: str, /) -> Self:
        _require(name, arg="name")
        self._name = name
        return self

    def with_option(self: Self, option: TableOption | KeyspaceOption | str, value: typing.Any = None, /) -> Self:
        _require(option, arg="option")
        if isinstance(option, str):
            option_name = option.lower()
            known = next((o for o in self._option_type if o.cql_name.lower() == option_name), None)
            if known is not None:
                bound = Option.of(known, value)
            elif _OPTION_NAME.fullmatch(option_name):
                bound = Option.infer(option_name, value)
            else:
                raise ValueError(f"{option!r} is not a valid option name.")
        else:
            bound = Option.of(option, value)
        self._options[bound.name] = bound
        return self

    def _frozen_options(self) -> frozendict[str, Option]:
        return frozendict(self._options)


class TableBuilder(_OptionsBuilder):
    _option_type = TableOption

    def __init__(self, name: str | None = None, *, keyspace: str | None = None):
        super().__init__(name)
        self._keyspace = keyspace
        self._if_not_exists = False
        self._columns: list[Column] = []

    def keyspace(self, keyspace: str, /) -> TableBuilder:
        _require(keyspace, arg="keyspace")
        self._keyspace = keyspace
        return self

    def if_not_exists(self, if_not_exists: bool = True, /) -> TableBuilder:
        self._if_not_exists = if_not_exists
        return self

    def column(self, name: str, data_type: TypeLike, /) -> TableBuilder:
        return self._add(name, data_type, key_type=None, ordinal=None, ordering=None)

    def partition_key_column(
        self,
        name: str,
        data_type: TypeLike,
        /,
        *,
        ordinal: int | None = None,
    ) -> TableBuilder:
        return self._add(name, data_type, key_type=KeyType.PARTITION, ordinal=ordinal, ordering=None)

    def clustering_key_column(
        self,
        name: str,
        data_type: TypeLike,
        /,
        *,
        ordering: Ordering | None = None,
        ordinal: int | None = None,
    ) -> TableBuilder:
        return self._add(name, data_type, key_type=KeyType.CLUSTERING, ordinal=ordinal, ordering=ordering)

    def build(self) -> CreateTableSpec:
        return CreateTableSpec(
            name=self._name,
            keyspace=self._keyspace,
            if_not_exists=self._if_not_exists,
            columns=tuple(self._columns),
            options=self._frozen_options(),
        )

    def _add(
        self,
        name: str,
        data_type: TypeLike,
        /,
        *,
        key_type: KeyType | None,
        ordinal: int | None,
        ordering: Ordering | None,
    ) -> TableBuilder:
        _require(name, arg="name")
        _require(data_type, arg="data_type")

        if key_type is not None and ordinal is None:
            ordinal = sum(1 for c in self._columns if c.key_type == key_type) + 1

        self._columns.append(
            Column(
                name=name,
                data_type=data_type,
                key_type=key_type,
                ordinal=ordinal,
                ordering=ordering if key_type == KeyType.CLUSTERING else None,
            )
        )
        return self


class AlterTableBuilder(_OptionsBuilder):
    _option_type = TableOption

    def __init__(self, name: str | None = None, *, keyspace: str | None = None):
        super().__init__(name)
        self._keyspace = keyspace
        self._changes: list[ColumnChange] = []

    def keyspace(self, keyspace: str, /) -> AlterTableBuilder:
        _require(keyspace, arg="keyspace")
        self._keyspace = keyspace
        return self

    def add(self, name: str, data_type: TypeLike, /) -> AlterTableBuilder:
        _require(name, arg="name")
        _require(data_type, arg="data_type")
        self._changes.append(AddColumn(name=name, data_type=data_type))
        return self

    def alter(self, name: str, data_type: TypeLike, /) -> AlterTableBuilder:
        _require(name, arg="name")
        _require(data_type, arg="data_type")
        self._changes.append(AlterColumn(name=name, data_type=data_type))
        return self

    def drop(self, name: str, /) -> AlterTableBuilder:
        _require(name, arg="name")
        self._changes.append(DropColumn(name=name))
        return self

    def build(self) -> AlterTableSpec:
        return AlterTableSpec(
            name=self._name,
            keyspace=self._keyspace,
            changes=tuple(self._changes),
            options=self._frozen_options(),
        )


class _KeyspaceBuilder(_OptionsBuilder):
    _option_type = KeyspaceOption

    def replication(self: Self, replication: typing.Mapping[str, typing.Any], /) -> Self:
        return self.with_option(KeyspaceOption.REPLICATION, replication)

    def durable_writes(self: Self, durable_writes: bool = True, /) -> Self:
        return self.with_option(KeyspaceOption.DURABLE_WRITES, durable_writes)


class CreateKeyspaceBuilder(_KeyspaceBuilder):
    def __init__(self, name: str | None = None):
        super().__init__(name)
        self._if_not_exists = False

    def if_not_exists(self, if_not_exists: bool = True, /) -> CreateKeyspaceBuilder:
        self._if_not_exists = if_not_exists
        return self

    def build(self) -> CreateKeyspaceSpec:
        return CreateKeyspaceSpec(
            name=self._name,
            if_not_exists=self._if_not_exists,
            options=self._frozen_options(),
        )


class AlterKeyspaceBuilder(_KeyspaceBuilder):
    def build(self) -> AlterKeyspaceSpec:
        return AlterKeyspaceSpec(name=self._name, options=self._frozen_options())
