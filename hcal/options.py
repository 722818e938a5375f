"""A registry of command-line options and the parser that fills it."""

from __future__ import annotations

import re
import sys
from collections import deque
from typing import Iterable, Optional

from hcal.optionspec import OptionError, OptionSpec, OptionType, parse_definition, split_command_line

_INT_PREFIX = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _leading_int(text: str) -> int:
    """Read an integer prefix the way C's strtol does with base 0."""
    match = _INT_PREFIX.match(text)
    if not match:
        return 0
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        number = int(digits[2:], 16)
    elif len(digits) > 1 and digits[0] == "0":
        number = int(digits[1:], 8)
    else:
        number = int(digits)
    return -number if sign == "-" else number


def _leading_float(text: str) -> float:
    """Read a floating-point prefix the way C's strtod does."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


class Options:
    """Defined options, the command line, and the result of parsing it."""

    def __init__(self, argv: Optional[Iterable[str]] = None, flag: str = "-") -> None:
        self.flag = flag
        self.options_requested = False
        self._specs: list[OptionSpec] = []
        self._index: dict[str, int] = {}
        self._argv: list[str] = list(argv) if argv is not None else []
        self._arguments: list[str] = []
        self._error_check = True
        self._suppress = False

    # -- definitions -------------------------------------------------------

    def define(self, definition: str, description: str = "") -> int:
        """Register an option and return its position in the registry."""
        spec = parse_definition(definition)
        spec.description = description
        for name in spec.names:
            if name in self._index:
                raise OptionError(
                    f'option "{name}" from definition: {definition} '
                    f"is already defined in: {self.definition(name)}"
                )
        position = len(self._specs)
        self._specs.append(spec)
        for name in spec.names:
            self._index[name] = position
        return position

    def is_defined(self, name: str) -> bool:
        """Return whether ``name`` is an option name or alias."""
        return name in self._index

    def definition(self, name: str) -> str:
        """Return the definition string of an option, or "" if it is unknown."""
        position = self._index.get(name)
        return "" if position is None else self._specs[position].definition

    def format_help(self) -> str:
        """Return one line per defined option: definition, tab, description."""
        return "".join(f"{spec.definition}\t{spec.description}\n" for spec in self._specs)

    # -- command line ------------------------------------------------------

    def set_arguments(self, argv: Iterable[str]) -> None:
        """Replace the command line (command name first)."""
        self._argv = list(argv)

    def append(self, argv: Iterable[str]) -> None:
        """Add words to the end of the command line."""
        self._argv.extend(argv)

    def append_string(self, text: str) -> None:
        """Split ``text`` like a shell would and add the words to the command line."""
        self.append(split_command_line(text))

    def command_line(self) -> str:
        """Return the command line joined with single spaces."""
        return " ".join(self._argv)

    # -- parsing -----------------------------------------------------------

    def process(self, error_check: bool = True, suppress: bool = False) -> None:
        """Parse the command line into option values and plain arguments.

        With ``error_check`` an unknown option raises :class:`OptionError`;
        without it the rest of that word is ignored.  With ``suppress`` a
        ``--options`` word sets :attr:`options_requested` instead of printing
        the option list and exiting.
        """
        if not self._argv:
            raise OptionError("no command line to process")
        self._error_check = error_check
        self._suppress = suppress
        self._arguments = [self._argv[0]]
        pending = deque(self._argv[1:])
        while pending:
            token = pending.popleft()
            if token == self.flag * 2:
                self._arguments.extend(pending)
                break
            if len(token) < 2 or token[0] != self.flag:
                self._arguments.append(token)
            elif token[1] == self.flag:
                self._store_long(token[2:], pending)
            else:
                self._store_short(token[1:], pending)

    def _take(self, pending: deque[str], name: str) -> str:
        if not pending:
            raise OptionError(f"last option requires a parameter: {name}")
        return pending.popleft()

    def _store_long(self, body: str, pending: deque[str]) -> None:
        name, equals, value = body.partition("=")
        spec = self._lookup(name)
        if spec is None:
            if name == "options":
                self.options_requested = True
            return
        if spec.type is OptionType.BOOLEAN:
            if equals:
                raise OptionError(f"boolean variable cannot have any options: {name}")
            spec.set_value("")
            return
        spec.set_value(value or self._take(pending, name))

    def _store_short(self, body: str, pending: deque[str]) -> None:
        for position, letter in enumerate(body):
            spec = self._lookup(letter)
            if spec is None:
                return
            if spec.type is OptionType.BOOLEAN:
                spec.set_value("")
                continue
            spec.set_value(body[position + 1 :] or self._take(pending, letter))
            return

    def _lookup(self, name: str) -> Optional[OptionSpec]:
        if name == "options":
            if self._suppress:
                return None
            sys.stdout.write(self.format_help())
            raise SystemExit(0)
        position = self._index.get(name)
        if position is None:
            if self._error_check:
                raise OptionError(f'unknown option "{name}"')
            return None
        return self._specs[position]

    # -- results -----------------------------------------------------------

    def argument(self, index: int) -> str:
        """Return a plain argument; index 0 is the command name."""
        if not 0 <= index < len(self._arguments):
            raise IndexError(f"argument {index} does not exist")
        return self._arguments[index]

    def arguments(self) -> list[str]:
        """Return the command name followed by the plain arguments."""
        return list(self._arguments)

    def argument_count(self) -> int:
        """Return the number of plain arguments, not counting the command name."""
        return max(len(self._arguments) - 1, 0)

    def command(self) -> str:
        """Return the command name, or "" before anything was processed."""
        return self._arguments[0] if self._arguments else ""

    def boolean(self, name: str) -> bool:
        """Return whether the option was given on the command line."""
        spec = self._lookup(name)
        return spec is not None and spec.modified()

    def string(self, name: str) -> str:
        """Return the option's value, or its default if it was not given."""
        spec = self._lookup(name)
        return "UNKNOWN OPTION" if spec is None else spec.value()

    def integer(self, name: str) -> int:
        """Return the option's value read as a decimal, hex or octal integer."""
        return _leading_int(self.string(name))

    def floating(self, name: str) -> float:
        """Return the option's value read as a floating-point number."""
        return _leading_float(self.string(name))

    def char(self, name: str) -> str:
        """Return the first character of the option's value, or ""."""
        return self.string(name)[:1]

    def option_type(self, name: str) -> Optional[OptionType]:
        """Return the type of an option, or None where it is unknown."""
        spec = self._lookup(name)
        return None if spec is None else spec.type

    def set_modified(self, name: str, value: str) -> None:
        """Give an option a value as if it had been on the command line."""
        spec = self._lookup(name)
        if spec is not None:
            spec.set_value(value)