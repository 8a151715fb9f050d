"""Euclid's GCD reduction over 64-bit unsigned integers.

gcd(n, m) is the two-operand primitive. reduce_numbers() and gcd_all()
left-fold it across a NumberSequence:

    acc = numbers[0]
    for value in numbers[1:]:
        acc = gcd(acc, value)

Zeros are absorbed (gcd(a, 0) == a), so they are skipped by the fold and
gcd(0, 0) is only reachable when every number is zero. The fold stops as
soon as the accumulator reaches 1, since nothing can reduce it further.
"""

import operator
from collections.abc import Sequence
from typing import SupportsIndex

from gcd_tool.core.types import U64_MAX, EmptySequenceError, FoldStep, PreconditionFailure, Reduction


def _as_u64(value: SupportsIndex, name: str) -> int:
    """Coerce an integer-like value to int and check it fits in 64 unsigned bits."""
    number = operator.index(value)
    if not 0 <= number <= U64_MAX:
        raise ValueError(f'{name}={number} is outside the 64-bit unsigned range')
    return number


def gcd(n: SupportsIndex, m: SupportsIndex) -> int:
    """Return the greatest common divisor of n and m. Not both may be zero."""
    if n == 0 and m == 0:
        raise PreconditionFailure('gcd(0, 0) is undefined: at least one operand must be non-zero')
    n = _as_u64(n, 'n')
    m = _as_u64(m, 'm')

    # gcd(0, m) == m; keep n non-zero so the modulus below is defined
    if n == 0:
        n, m = m, n

    while m != 0:
        if m < n:
            m, n = n, m
        m = m % n
    return n


def reduce_numbers(numbers: Sequence[SupportsIndex]) -> Reduction:
    """Fold gcd() left-to-right across numbers, recording every step."""
    if len(numbers) == 0:
        raise EmptySequenceError()

    values = tuple(_as_u64(v, f'numbers[{i}]') for i, v in enumerate(numbers))
    if not any(values):
        raise PreconditionFailure('gcd of an all-zero sequence is undefined')

    acc = values[0]
    reduction = Reduction(numbers=values, result=acc)
    for value in values[1:]:
        if acc == 1:
            reduction.short_circuited = True
            break
        if value == 0:
            continue
        result = gcd(acc, value)
        reduction.steps.append(FoldStep(accumulator=acc, value=value, result=result))
        acc = result

    reduction.result = acc
    return reduction


def gcd_all(numbers: Sequence[SupportsIndex]) -> int:
    """Return the GCD of a non-empty sequence of numbers."""
    return reduce_numbers(numbers).result
