import dataclasses

from cqlgen.data.data_type import TypeLike
from cqlgen.data.key_type import KeyType, Ordering

__all__ = ("Column",)


@dataclasses.dataclass(frozen=True, kw_only=True)
class Column:
    name: str
    data_type: TypeLike
    key_type: KeyType | None = None
    ordinal: int | None = None
    ordering: Ordering | None = None

    @property
    def is_partition_key(self) -> bool:
        return self.key_type == KeyType.PARTITION

    @property
    def is_clustering_key(self) -> bool:
        return self.key_type == KeyType.CLUSTERING
