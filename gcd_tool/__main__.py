"""gcd-tool — Greatest common divisor of unsigned 64-bit integers.

Usage: uv run gcd-tool <num1> [<num2> ...] [options]

Folds Euclid's algorithm left-to-right across the numbers and prints the
result as a single decimal integer on stdout. Use '-' to read
whitespace-separated numbers from stdin.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, gcd-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

Exit codes: 0 on success, 2 on usage errors (no numbers, invalid numbers,
all-zero input, bad configuration).
"""

import argparse
import sys

from gcd_tool.core.env import load_env, resolve_settings
from gcd_tool.core.euclid import reduce_numbers
from gcd_tool.core.number_parser import expand_stdin, parse_numbers
from gcd_tool.core.report import format_json, format_text, format_trace
from gcd_tool.core.types import UsageError


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  gcd-tool 12 18\n'
        '  gcd-tool 8 12 20 --verbose\n'
        '  gcd-tool 8 12 20 --json\n'
        '  echo "12 18" | gcd-tool -\n'
        '\n'
        'Config env vars (set in .env or environment):\n'
        '  GCD_TOOL_FORMAT=text|json\n'
        '  GCD_TOOL_VERBOSE=1\n'
    )
    parser = argparse.ArgumentParser(
        prog='gcd-tool',
        description='Compute the greatest common divisor of unsigned 64-bit integers.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    parser.add_argument('-v', '--verbose', action='store_true', help='Print each fold step on stderr')
    parser.add_argument('numbers', nargs='*', metavar='NUM', help="Base-10 unsigned integers, or '-' for stdin")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        # Load .env before anything else — OS env vars always win
        env_path = load_env(env_file=args.env_file)
        settings = resolve_settings(env_path, json_flag=args.json, verbose_flag=args.verbose)
        if settings.env_path:
            print(f'gcd-tool: loaded {settings.env_path}', file=sys.stderr)

        numbers = parse_numbers(expand_stdin(args.numbers, sys.stdin))
        if not any(numbers):
            raise UsageError('gcd of zeros only is undefined; supply at least one non-zero number')
    except UsageError as exc:
        parser.error(str(exc))

    reduction = reduce_numbers(numbers)

    if settings.verbose:
        print(format_trace(reduction), file=sys.stderr)

    if settings.output_format == 'json':
        print(format_json(reduction))
    else:
        print(format_text(reduction))


if __name__ == '__main__':
    main()
