# catr/core/numbering.py
# Line numbering state machine: three numbering modes & the per-line transition

# * A mode is an immutable value; each line produces the next mode instead of
# * mutating the current one, so the transition can be tested as (line, mode) pairs.

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from .constants import NUMBER_WIDTH, NUMBER_SEPARATOR


def _check_counter(counter: int) -> None:
    if counter < 1:
        raise ValueError(f"line counter must be a positive integer, got {counter}")


# * Number every line, blank or not
@dataclass(frozen=True)
class Number:
    counter: int = 1

    def __post_init__(self) -> None:
        _check_counter(self.counter)


# * Number non-blank lines only; blank lines pass through & keep the counter
@dataclass(frozen=True)
class NumberNonblank:
    counter: int = 1

    def __post_init__(self) -> None:
        _check_counter(self.counter)


# * Pass lines through untouched
@dataclass(frozen=True)
class NoNumber:
    pass


NumberingMode = Union[Number, NumberNonblank, NoNumber]


# * Render the numeric prefix: right-justified in NUMBER_WIDTH columns, then a tab
def format_number(counter: int) -> str:
    return f"{counter:>{NUMBER_WIDTH}}{NUMBER_SEPARATOR}"


# * Format one line under `mode` & return it along w/ the mode for the next line
def format_and_advance(line: str, mode: NumberingMode) -> tuple[str, NumberingMode]:
    if isinstance(mode, NoNumber):
        return line, mode
    if isinstance(mode, Number):
        return format_number(mode.counter) + line, Number(mode.counter + 1)
    if isinstance(mode, NumberNonblank):
        if line == "":
            return line, mode
        return format_number(mode.counter) + line, NumberNonblank(mode.counter + 1)
    raise TypeError(f"Unknown numbering mode: {mode!r}")


# * Lazily number a stream of lines, threading the mode through each line in order
def number_stream(lines: Iterable[str], mode: NumberingMode) -> Iterator[str]:
    for line in lines:
        formatted, mode = format_and_advance(line, mode)
        yield formatted


# * Choose the initial mode from the two numbering flags.
# * Both flags set is not a valid combination & falls through to NoNumber.
def select_mode(number_lines: bool, number_nonblank_lines: bool) -> NumberingMode:
    if number_lines and not number_nonblank_lines:
        return Number()
    if number_nonblank_lines and not number_lines:
        return NumberNonblank()
    return NoNumber()


# * Short label for a mode (used in verbose logs)
def describe_mode(mode: NumberingMode) -> str:
    if isinstance(mode, Number):
        return f"number all lines from {mode.counter}"
    if isinstance(mode, NumberNonblank):
        return f"number non-blank lines from {mode.counter}"
    return "no numbering"
