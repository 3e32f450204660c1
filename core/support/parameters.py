"""Parsing of ``-p NAME=VALUE`` template parameters."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from core.utils.errors import MalformedParameterError

_SEPARATOR = "="
_USAGE_HINT = "Wrong syntax of '-p' flag. Please use it like this: '-p FOO=BAR'"


def placeholder_token(name: str) -> str:
    """Return the literal ``${NAME}`` token for a parameter name."""

    return f"${{{name}}}"


@dataclass(frozen=True)
class Parameter:
    """A single user-supplied substitution."""

    name: str
    value: str

    @property
    def token(self) -> str:
        return placeholder_token(self.name)


@dataclass(frozen=True)
class ParameterSet:
    """Ordered parameters as given on the command line.

    Duplicates are kept as separate entries so they are applied one after
    the other.
    """

    parameters: tuple[Parameter, ...] = ()

    @classmethod
    def parse(cls, raw_pairs: Sequence[str]) -> ParameterSet:
        """Parse raw ``NAME=VALUE`` strings.

        The entry is split on the first ``=``, so values may contain ``=``.

        Raises:
            MalformedParameterError: entry has no ``=`` or an empty name/value.
        """

        parsed: list[Parameter] = []
        for raw in raw_pairs:
            if _SEPARATOR not in raw:
                raise MalformedParameterError(_USAGE_HINT, raw=raw)
            name, value = raw.split(_SEPARATOR, 1)
            if not name or not value:
                raise MalformedParameterError(_USAGE_HINT, raw=raw)
            parsed.append(Parameter(name=name, value=value))
        return cls(parameters=tuple(parsed))

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self.parameters)

    def __len__(self) -> int:
        return len(self.parameters)

    def names(self) -> list[str]:
        return [parameter.name for parameter in self.parameters]
