from __future__ import annotations

import dataclasses
import enum
import typing

__all__ = ("CollectionType", "DataType", "TypeLike", "render_type")


class DataType(enum.Enum):
    Ascii = "ascii"
    BigInt = "bigint"
    Blob = "blob"
    Bool = "boolean"
    Counter = "counter"
    Date = "date"
    Decimal = "decimal"
    Double = "double"
    Duration = "duration"
    Float = "float"
    Inet = "inet"
    Int = "int"
    SmallInt = "smallint"
    Text = "text"
    Time = "time"
    Timestamp = "timestamp"
    TimeUUID = "timeuuid"
    TinyInt = "tinyint"
    UUID = "uuid"
    Varchar = "varchar"
    VarInt = "varint"

    def __str__(self) -> str:
        return self.value


_ARITY: typing.Final[dict[str, tuple[int, int | None]]] = {
    "list": (1, 1),
    "set": (1, 1),
    "map": (2, 2),
    "frozen": (1, 1),
    "tuple": (1, None),
}


@dataclasses.dataclass(frozen=True)
class CollectionType:
    kind: str
    args: tuple[TypeLike, ...]

    def __post_init__(self) -> None:
        if self.kind not in _ARITY:
            raise ValueError(f"Expected kind to be one of {', '.join(_ARITY)}, but got {self.kind!r}.")

        min_args, max_args = _ARITY[self.kind]
        if len(self.args) < min_args or (max_args is not None and len(self.args) > max_args):
            raise ValueError(
                f"{self.kind} takes between {min_args} and {max_args or 'any number of'} type arguments, "
                f"but got {len(self.args)}."
            )

    @staticmethod
    def list_of(element: TypeLike, /) -> CollectionType:
        return CollectionType(kind="list", args=(element,))

    @staticmethod
    def set_of(element: TypeLike, /) -> CollectionType:
        return CollectionType(kind="set", args=(element,))

    @staticmethod
    def map_of(key: TypeLike, value: TypeLike, /) -> CollectionType:
        return CollectionType(kind="map", args=(key, value))

    @staticmethod
    def tuple_of(*elements: TypeLike) -> CollectionType:
        return CollectionType(kind="tuple", args=tuple(elements))

    @staticmethod
    def frozen(inner: TypeLike, /) -> CollectionType:
        return CollectionType(kind="frozen", args=(inner,))

    def __str__(self) -> str:
        return render_type(self)


TypeLike: typing.TypeAlias = DataType | CollectionType


def render_type(data_type: TypeLike, /) -> str:
    if isinstance(data_type, DataType):
        return data_type.value
    elif isinstance(data_type, CollectionType):
        return f"{data_type.kind}<{', '.join(render_type(arg) for arg in data_type.args)}>"
    else:
        raise TypeError(f"Expected a DataType or CollectionType, but got {data_type!r}.")
