import pydantic

from cqlgen.data.cluster_config import ClusterConfig

__all__ = ("Config",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class Config:
    clusters: tuple[ClusterConfig, ...]

    def cluster(self, /, name: str) -> ClusterConfig | None:
        return next((c for c in self.clusters if c.name == name), None)

    def __repr__(self) -> str:
        return f"Config(clusters={self.clusters})"
