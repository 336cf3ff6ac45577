from __future__ import annotations

import dataclasses
import decimal
import enum
import typing

from frozendict import frozendict

__all__ = (
    "KeyspaceOption",
    "Option",
    "OptionKind",
    "Options",
    "TableOption",
    "network_topology_strategy",
    "simple_strategy",
)


# noinspection PyArgumentList
class OptionKind(enum.Enum):
    STRING = enum.auto()
    NUMBER = enum.auto()
    BOOLEAN = enum.auto()
    MAP = enum.auto()
    FLAG = enum.auto()


class TableOption(enum.Enum):
    COMMENT = ("comment", OptionKind.STRING)
    COMPACT_STORAGE = ("COMPACT STORAGE", OptionKind.FLAG)
    COMPACTION = ("compaction", OptionKind.MAP)
    COMPRESSION = ("compression", OptionKind.MAP)
    CACHING = ("caching", OptionKind.MAP)
    BLOOM_FILTER_FP_CHANCE = ("bloom_filter_fp_chance", OptionKind.NUMBER)
    READ_REPAIR_CHANCE = ("read_repair_chance", OptionKind.NUMBER)
    DCLOCAL_READ_REPAIR_CHANCE = ("dclocal_read_repair_chance", OptionKind.NUMBER)
    GC_GRACE_SECONDS = ("gc_grace_seconds", OptionKind.NUMBER)
    DEFAULT_TIME_TO_LIVE = ("default_time_to_live", OptionKind.NUMBER)
    MEMTABLE_FLUSH_PERIOD_IN_MS = ("memtable_flush_period_in_ms", OptionKind.NUMBER)
    CRC_CHECK_CHANCE = ("crc_check_chance", OptionKind.NUMBER)
    SPECULATIVE_RETRY = ("speculative_retry", OptionKind.STRING)

    @property
    def cql_name(self) -> str:
        return self.value[0]

    @property
    def kind(self) -> OptionKind:
        return self.value[1]


class KeyspaceOption(enum.Enum):
    REPLICATION = ("replication", OptionKind.MAP)
    DURABLE_WRITES = ("durable_writes", OptionKind.BOOLEAN)

    @property
    def cql_name(self) -> str:
        return self.value[0]

    @property
    def kind(self) -> OptionKind:
        return self.value[1]


@dataclasses.dataclass(frozen=True)
class Option:
    name: str
    value: typing.Any
    kind: OptionKind

    @staticmethod
    def of(option: TableOption | KeyspaceOption, value: typing.Any = None, /) -> Option:
        return Option(name=option.cql_name, value=_freeze(value), kind=option.kind)

    @staticmethod
    def infer(name: str, value: typing.Any = None, /) -> Option:
        """Bind an option that has no entry in TableOption or KeyspaceOption.

        The kind is derived from the Python type of the value.  Note that bool
        is checked before the numeric types since bool is a subclass of int.
        """
        if value is None:
            kind = OptionKind.FLAG
        elif isinstance(value, bool):
            kind = OptionKind.BOOLEAN
        elif isinstance(value, (int, float, decimal.Decimal)):
            kind = OptionKind.NUMBER
        elif isinstance(value, str):
            kind = OptionKind.STRING
        elif isinstance(value, typing.Mapping):
            kind = OptionKind.MAP
        else:
            raise TypeError(f"Cannot infer an option kind for {name} from {value!r}.")

        return Option(name=name, value=_freeze(value), kind=kind)


Options: typing.TypeAlias = "frozendict[str, Option]"


def simple_strategy(replication_factor: int = 1, /) -> frozendict[str, typing.Any]:
    return frozendict({"class": "SimpleStrategy", "replication_factor": replication_factor})


def network_topology_strategy(
    replication_factors: typing.Mapping[str, int], /
) -> frozendict[str, typing.Any]:
    return frozendict({"class": "NetworkTopologyStrategy", **replication_factors})


def _freeze(value: typing.Any, /) -> typing.Any:
    if isinstance(value, typing.Mapping):
        return frozendict({key: _freeze(val) for key, val in value.items()})
    return value
