"""Tests for gcd_tool.core.report — text, trace and JSON formatting."""

import json

from gcd_tool.core.euclid import reduce_numbers
from gcd_tool.core.report import format_json, format_text, format_trace


class TestFormatText:
    def test_bare_result(self) -> None:
        assert format_text(reduce_numbers([12, 18])) == '6'

    def test_no_trailing_newline(self) -> None:
        assert not format_text(reduce_numbers([7])).endswith('\n')


class TestFormatTrace:
    def test_one_line_per_step(self) -> None:
        out = format_trace(reduce_numbers([8, 12, 20]))
        assert out.splitlines() == ['gcd(8, 12) = 4', 'gcd(4, 20) = 4']

    def test_single_number(self) -> None:
        assert format_trace(reduce_numbers([7])) == 'gcd(7) = 7'

    def test_short_circuit_noted(self) -> None:
        out = format_trace(reduce_numbers([4, 9, 100]))
        assert out.splitlines() == ['gcd(4, 9) = 1', 'reached 1, remaining numbers skipped']


class TestFormatJson:
    def test_structure(self) -> None:
        parsed = json.loads(format_json(reduce_numbers([8, 12, 20])))
        assert parsed == {
            'numbers': [8, 12, 20],
            'gcd': 4,
            'steps': [
                {'accumulator': 8, 'value': 12, 'result': 4},
                {'accumulator': 4, 'value': 20, 'result': 4},
            ],
            'short_circuited': False,
        }

    def test_large_values_exact(self) -> None:
        parsed = json.loads(format_json(reduce_numbers([18446744073709551615])))
        assert parsed['gcd'] == 18446744073709551615
