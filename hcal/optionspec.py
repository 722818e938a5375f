"""Option definitions and command-line tokenising."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class OptionError(ValueError):
    """Raised for a malformed option definition or a bad command line."""


class OptionType(Enum):
    """The data type an option's value is read as."""

    BOOLEAN = "b"
    CHAR = "c"
    DOUBLE = "d"
    FLOAT = "f"
    INT = "i"
    STRING = "s"


@dataclass
class OptionSpec:
    """One defined option: its names, type, default and any value given."""

    names: tuple[str, ...]
    type: OptionType
    default: str = ""
    definition: str = ""
    description: str = ""
    _value: Optional[str] = field(default=None, repr=False, compare=False)

    def value(self) -> str:
        """Return the value given on the command line, else the default."""
        return self._value if self._value is not None else self.default

    def modified(self) -> bool:
        """Return whether a value has been given for this option."""
        return self._value is not None

    def set_value(self, value: str) -> None:
        """Record a value given for this option."""
        self._value = value

    def clear(self) -> None:
        """Forget any value given, returning to the default."""
        self._value = None


def _strip_spaces(text: str) -> str:
    return "".join(ch for ch in text if not ch.isspace())


def parse_definition(definition: str) -> OptionSpec:
    """Parse ``name|alias...=type[:default]`` into an :class:`OptionSpec`."""
    aliases, sep, rest = definition.partition("=")
    if not sep:
        raise OptionError(f'no "=" in option definition: {definition}')

    type_text, _, default = rest.partition(":")
    type_text = _strip_spaces(type_text)
    if len(type_text) != 1:
        raise OptionError(
            f"option type is invalid: {type_text} in option definition: {definition}"
        )
    try:
        option_type = OptionType(type_text)
    except ValueError:
        raise OptionError(
            f"unknown option type '{type_text}' in definition: {definition}"
        ) from None

    names: list[str] = []
    for part in aliases.split("|"):
        name = _strip_spaces(part)
        if not name:
            continue
        if name in names:
            raise OptionError(
                f'option "{name}" is defined twice in definition: {definition}'
            )
        names.append(name)

    return OptionSpec(
        names=tuple(names),
        type=option_type,
        default=default,
        definition=definition,
    )


def split_command_line(text: str) -> list[str]:
    """Split ``text`` into arguments the way a simple shell would.

    Whitespace separates arguments.  Single or double quotes group text into
    one argument, which ends at the closing quote and may be empty.  Inside
    either kind of quoting, or outside it, a backslash before a quote
    character yields that quote literally.
    """
    tokens: list[str] = []
    current: list[str] = []
    quote: Optional[str] = None
    chars = iter(text)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, None)
            if nxt is None:
                current.append(ch)
            elif nxt in "\"'":
                current.append(nxt)
            else:
                current.append(ch)
                if quote is None and nxt.isspace():
                    if current:
                        tokens.append("".join(current))
                        current = []
                else:
                    current.append(nxt)
            continue
        if quote is None:
            if ch in "\"'":
                quote = ch
            elif ch.isspace():
                if current:
                    tokens.append("".join(current))
                    current = []
            else:
                current.append(ch)
        elif ch == quote:
            tokens.append("".join(current))
            current = []
            quote = None
        else:
            current.append(ch)
    if quote is not None:
        raise OptionError(f"unterminated {quote} quote in: {text}")
    if current:
        tokens.append("".join(current))
    return tokens