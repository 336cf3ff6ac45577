from __future__ import annotations

import decimal
import io
import typing

from cqlgen import data
from cqlgen.adapter.cql import ensure_buffer, quote_string

__all__ = ("Generator", "options_cql", "render_value", "with_options")


class _HasOptions(typing.Protocol):
    @property
    def options(self) -> typing.Mapping[str, data.Option]:
        ...


Spec = typing.TypeVar("Spec", bound=_HasOptions)

Generator: typing.TypeAlias = typing.Callable[..., io.StringIO]


def render_value(option: data.Option, /) -> str:
    return {
        data.OptionKind.STRING: _render_string,
        data.OptionKind.NUMBER: _render_number,
        data.OptionKind.BOOLEAN: _render_boolean,
        data.OptionKind.MAP: _render_map,
        data.OptionKind.FLAG: _render_flag,
    }[option.kind](option.name, option.value)


def options_cql(options: typing.Mapping[str, data.Option], /, *, leading: typing.Iterable[str] = ()) -> str:
    clauses = list(leading)
    for option in options.values():
        value = render_value(option)
        if option.kind == data.OptionKind.FLAG:
            clauses.append(option.name)
        else:
            clauses.append(f"{option.name} = {value}")

    if clauses:
        return " WITH " + " AND ".join(clauses)
    return ""


def with_options(
    assemble: typing.Callable[[Spec, io.StringIO], None],
    /,
    *,
    leading: typing.Callable[[Spec], typing.Iterable[str]] | None = None,
) -> typing.Callable[[Spec, io.StringIO | None], io.StringIO]:
    """Wrap a statement-specific assembly function with the WITH clause and terminator.

    The returned generator renders into a scratch buffer first, so a spec that
    fails validation leaves the caller's buffer untouched.
    """

    def generate(spec: Spec, buf: io.StringIO | None = None, /) -> io.StringIO:
        scratch = io.StringIO()
        assemble(spec, scratch)
        scratch.write(
            options_cql(
                spec.options,
                leading=leading(spec) if leading else (),
            )
        )
        scratch.write(";")

        buf = ensure_buffer(buf)
        buf.write(scratch.getvalue())
        return buf

    return generate


def _render_string(name: str, value: typing.Any, /) -> str:
    if not isinstance(value, str):
        raise data.InvalidOptionValue(option_name=name, value=value, expected="a string")
    return quote_string(value)


def _render_number(name: str, value: typing.Any, /) -> str:
    if isinstance(value, str):
        try:
            number = decimal.Decimal(value.strip())
        except decimal.InvalidOperation:
            raise data.InvalidOptionValue(option_name=name, value=value, expected="a number") from None
        if not number.is_finite():
            raise data.InvalidOptionValue(option_name=name, value=value, expected="a finite number")
        return str(number)

    if isinstance(value, bool) or not isinstance(value, (int, float, decimal.Decimal)):
        raise data.InvalidOptionValue(option_name=name, value=value, expected="a number")
    return str(value)


def _render_boolean(name: str, value: typing.Any, /) -> str:
    if not isinstance(value, bool):
        raise data.InvalidOptionValue(option_name=name, value=value, expected="a boolean")
    return "true" if value else "false"


def _render_map(name: str, value: typing.Any, /) -> str:
    if not isinstance(value, typing.Mapping):
        raise data.InvalidOptionValue(option_name=name, value=value, expected="a mapping")

    entries = []
    for key, val in value.items():
        if val is None:
            raise data.InvalidOptionValue(option_name=f"{name}.{key}", value=val, expected="a value")
        try:
            entry = data.Option.infer(str(key), val)
        except TypeError as e:
            raise data.InvalidOptionValue(
                option_name=f"{name}.{key}", value=val, expected="a string, number, boolean or mapping"
            ) from e
        entries.append(f"{quote_string(str(key))}: {render_value(entry)}")
    return "{" + ", ".join(entries) + "}"


def _render_flag(name: str, value: typing.Any, /) -> str:
    if value is not None:
        raise data.InvalidOptionValue(option_name=name, value=value, expected="no value")
    return ""
