"""Display names for enum members, rendered in a chosen case."""

from __future__ import annotations

import argparse
import enum
from collections.abc import Callable

from vikingcase.casing import CaseType, to_case

_CaseSpec = CaseType | str | None


def _resolve(case: _CaseSpec) -> CaseType | None:
    if case is None or isinstance(case, CaseType):
        return case
    return CaseType.parse(case)


def display_name(name: str, case: _CaseSpec = None, override: _CaseSpec = None) -> str:
    """Render a member name: ``override`` wins over ``case``; with neither, it is unchanged."""
    chosen = _resolve(override)
    if chosen is None:
        chosen = _resolve(case)
    if chosen is None:
        return name
    return to_case(name, chosen)


def enum_display(case: _CaseSpec = None, **kwargs: _CaseSpec) -> Callable[[type], type]:
    """Class decorator giving an Enum a ``str`` of each member's name in a case.

    ``case`` applies to every member; keyword arguments named after members
    override it for those members.
    """
    default = _resolve(case)
    overrides = {name: _resolve(value) for name, value in kwargs.items()}

    def decorate(cls: type) -> type:
        if not (isinstance(cls, type) and issubclass(cls, enum.Enum)):
            raise TypeError("Must be a enum.")
        unknown = sorted(set(overrides) - set(cls.__members__))
        if unknown:
            raise ValueError(f"{cls.__name__} has no member named {', '.join(unknown)}")
        by_member = {cls.__members__[name]: value for name, value in overrides.items()}
        names = {
            member: display_name(member.name, default, by_member.get(member))
            for member in cls
        }

        def __str__(self: enum.Enum) -> str:
            return names[self]

        def __format__(self: enum.Enum, spec: str) -> str:
            return format(names[self], spec)

        cls.__str__ = __str__
        cls.__format__ = __format__
        return cls

    return decorate


@enum_display(CaseType.COBOL, YesNo=CaseType.UPPER, NoYes=CaseType.ADA)
class Work(enum.Enum):
    """Sample enum shown by the command."""

    YesNo = enum.auto()
    NoYes = enum.auto()


def main(argv: list[str] | None = None) -> int:
    """Print the display names of the sample enum."""
    parser = argparse.ArgumentParser(
        prog="vikingcase", description="Show the display names of a sample enum."
    )
    parser.parse_args(argv)
    for member in Work:
        print(member)
    return 0