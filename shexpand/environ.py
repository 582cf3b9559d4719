"""Shell variables and the environments that hold them."""

from __future__ import annotations

import abc
import bisect
import enum
import os
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

# Maximum number of name references followed when resolving a variable, so
# that reference loops cannot hang a program.
MAX_NAME_REF_DEPTH = 100


class ValueKind(enum.IntEnum):
    """The kind of value a shell variable holds."""

    UNSET = 0
    STRING = 1
    NAMEREF = 2
    INDEXED = 3
    ASSOCIATIVE = 4


@dataclass
class Variable:
    """A shell variable with its attributes and value.

    ``value`` is used for string and name reference variables, ``values`` for
    indexed arrays and ``mapping`` for associative arrays. The default
    instance is a valid unset variable.
    """

    local: bool = False
    exported: bool = False
    read_only: bool = False
    kind: ValueKind = ValueKind.UNSET
    value: str = ""
    values: list[str] = field(default_factory=list)
    mapping: dict[str, str] = field(default_factory=dict)

    def is_set(self) -> bool:
        """Whether the variable is set; an empty variable still counts."""
        return self.kind is not ValueKind.UNSET

    def __str__(self) -> str:
        if self.kind is ValueKind.STRING:
            return self.value
        if self.kind is ValueKind.INDEXED and self.values:
            return self.values[0]
        return ""

    def resolve(self, env: Environ) -> tuple[str, Variable]:
        """Follow name references, returning the last name and its variable."""
        name = ""
        current = self
        for _ in range(MAX_NAME_REF_DEPTH):
            if current.kind is not ValueKind.NAMEREF:
                return name, current
            name = current.value
            current = env.get(name)
        return name, Variable()


class Environ(abc.ABC):
    """A read-only view of a shell's variables."""

    @abc.abstractmethod
    def get(self, name: str) -> Variable:
        """Return the variable called ``name``; it may be unset."""

    @abc.abstractmethod
    def each(self) -> Iterator[tuple[str, Variable]]:
        """Yield ``(name, variable)`` pairs for all set variables.

        Names need not be unique or sorted; a later occurrence takes
        priority over an earlier one.
        """


class WriteEnviron(Environ):
    """An environment whose variables may be modified and removed."""

    @abc.abstractmethod
    def set(self, name: str, variable: Variable) -> None:
        """Set or, if ``variable`` is unset, remove a variable.

        Raises an exception if the operation is invalid, for example when
        overwriting a read-only variable.
        """


class FuncEnviron(Environ):
    """An environment backed by a function from names to string values.

    Empty strings are treated as unset variables, and every variable is
    exported. Iteration yields nothing.
    """

    def __init__(self, fn: Callable[[str], str]) -> None:
        self._fn = fn

    def get(self, name: str) -> Variable:
        value = self._fn(name)
        if value == "":
            return Variable()
        return Variable(exported=True, kind=ValueKind.STRING, value=value)

    def each(self) -> Iterator[tuple[str, Variable]]:
        return iter(())


class ListEnviron(Environ):
    """An environment built from ``name=value`` strings.

    Entries without a name are dropped, and when a name appears more than
    once the entry that sorts last wins. All variables are exported.
    """

    def __init__(self, pairs: Iterable[str]) -> None:
        cleaned: list[str] = []
        last = ""
        for pair in sorted(pairs):
            sep = pair.find("=")
            if sep <= 0:
                continue
            name = pair[:sep]
            if cleaned and name == last:
                cleaned[-1] = pair
                continue
            cleaned.append(pair)
            last = name
        self._pairs = cleaned

    @property
    def pairs(self) -> list[str]:
        """The sorted ``name=value`` strings held by the environment."""
        return list(self._pairs)

    def get(self, name: str) -> Variable:
        prefix = name + "="
        i = bisect.bisect_left(self._pairs, prefix)
        if i < len(self._pairs) and self._pairs[i].startswith(prefix):
            return Variable(
                exported=True,
                kind=ValueKind.STRING,
                value=self._pairs[i][len(prefix):],
            )
        return Variable()

    def each(self) -> Iterator[tuple[str, Variable]]:
        for pair in self._pairs:
            name, _, value = pair.partition("=")
            yield name, Variable(exported=True, kind=ValueKind.STRING, value=value)


def list_environ(*args: str, upper: bool | None = None) -> ListEnviron:
    """Build a :class:`ListEnviron` from ``name=value`` strings.

    With ``upper`` true, names are uppercased before duplicates are removed.
    By default this happens only on Windows, where names are case-insensitive.
    """
    if upper is None:
        upper = os.name == "nt"
    pairs = list(args)
    if upper:
        uppered = []
        for pair in pairs:
            sep = pair.find("=")
            if sep > 0:
                pair = pair[:sep].upper() + pair[sep:]
            uppered.append(pair)
        pairs = uppered
    return ListEnviron(pairs)