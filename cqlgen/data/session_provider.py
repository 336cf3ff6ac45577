import abc
import contextlib
import typing

from cqlgen.data.error import Error

__all__ = ("Session", "SessionProvider")


class Session(typing.Protocol):
    def execute(self, query: str, /) -> typing.Any:
        ...


class SessionProvider(abc.ABC):
    @contextlib.contextmanager
    @abc.abstractmethod
    def open(self) -> typing.Generator[Session | Error, None, None]:
        raise NotImplementedError
