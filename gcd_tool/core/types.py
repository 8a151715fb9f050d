"""Shared types for gcd-tool: NumberSequence, FoldStep, Reduction, Settings, errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

# Largest value a Number may hold (2**64 - 1)
U64_MAX: int = int(np.iinfo(np.uint64).max)

# Parsed numbers, in argument order. Built once, never mutated.
NumberSequence = tuple[int, ...]

OUTPUT_FORMATS = ('text', 'json')


class GcdToolError(Exception):
    """Base class for user-facing errors."""


class UsageError(GcdToolError):
    """Bad invocation or configuration. Reported before any reduction runs."""


class InvalidNumberError(UsageError):
    """A single argument could not be parsed as a 64-bit unsigned integer."""

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(f'invalid number {argument!r}: {reason}')


class EmptySequenceError(UsageError):
    """No numbers were supplied."""

    def __init__(self, message: str = 'at least one number is required'):
        super().__init__(message)


class PreconditionFailure(AssertionError):
    """The reducer was called outside its contract (both operands zero).

    Signals a logic error in how inputs reached the reducer. Deliberately not
    a GcdToolError: callers are not expected to recover from it.
    """


@dataclass(frozen=True)
class FoldStep:
    """One application of gcd() during a fold."""

    accumulator: int
    value: int
    result: int


@dataclass
class Reduction:
    """Outcome of folding gcd() across a NumberSequence."""

    numbers: NumberSequence
    result: int
    steps: list[FoldStep] = field(default_factory=list)
    short_circuited: bool = False  # stopped early once the accumulator hit 1


@dataclass
class Settings:
    """Resolved configuration for one run."""

    output_format: str = 'text'  # 'text' or 'json'
    verbose: bool = False
    env_path: Path | None = None  # .env that was loaded, if any
