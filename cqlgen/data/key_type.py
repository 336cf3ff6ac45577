import enum

__all__ = ("KeyType", "Ordering")


class KeyType(enum.Enum):
    PARTITION = "partition"
    CLUSTERING = "clustering"


class Ordering(enum.Enum):
    ASC = "ASC"
    DESC = "DESC"
