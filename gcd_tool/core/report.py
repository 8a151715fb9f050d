"""Report builder: text, trace and JSON output for gcd-tool results."""

import json
from typing import Any

from gcd_tool.core.types import Reduction


def format_text(reduction: Reduction) -> str:
    """Format the result as a bare decimal integer."""
    return str(reduction.result)


def format_trace(reduction: Reduction) -> str:
    """Format the fold steps as human-readable lines."""
    lines = [f'gcd({s.accumulator}, {s.value}) = {s.result}' for s in reduction.steps]
    if not lines:
        lines.append(f'gcd({", ".join(str(n) for n in reduction.numbers)}) = {reduction.result}')
    if reduction.short_circuited:
        lines.append('reached 1, remaining numbers skipped')
    return '\n'.join(lines)


def format_json(reduction: Reduction) -> str:
    """Format the result and fold steps as JSON."""
    obj: dict[str, Any] = {
        'numbers': list(reduction.numbers),
        'gcd': reduction.result,
        'steps': [
            {'accumulator': s.accumulator, 'value': s.value, 'result': s.result} for s in reduction.steps
        ],
        'short_circuited': reduction.short_circuited,
    }
    return json.dumps(obj, indent=2)
