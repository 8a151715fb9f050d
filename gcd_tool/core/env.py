"""Configuration for gcd-tool: .env loading and GCD_TOOL_* settings.

Load order (first wins):
  1. Command-line flags (--json, --verbose).
  2. Existing OS environment variables — never overwritten.
  3. .env file at --env-file path (if explicitly provided).
  4. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  GCD_TOOL_FORMAT    text (default) or json
  GCD_TOOL_VERBOSE   1/true/yes/on to print the fold trace on stderr
"""

import os
from pathlib import Path

from gcd_tool.core.types import OUTPUT_FORMATS, Settings, UsageError

FORMAT_VAR = 'GCD_TOOL_FORMAT'
VERBOSE_VAR = 'GCD_TOOL_VERBOSE'

_TRUTHY = {'1', 'true', 'yes', 'on'}


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value pairs. Quotes around values are stripped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env entries into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _is_truthy(value: str | None) -> bool:
    return (value or '').strip().lower() in _TRUTHY


def resolve_settings(
    env_path: Path | None = None,
    json_flag: bool = False,
    verbose_flag: bool = False,
) -> Settings:
    """Combine CLI flags with GCD_TOOL_* variables. Flags take precedence."""
    output_format = 'json' if json_flag else os.environ.get(FORMAT_VAR, 'text').strip().lower() or 'text'
    if output_format not in OUTPUT_FORMATS:
        raise UsageError(f'{FORMAT_VAR} must be one of {", ".join(OUTPUT_FORMATS)}, got {output_format!r}')

    verbose = verbose_flag or _is_truthy(os.environ.get(VERBOSE_VAR))
    return Settings(output_format=output_format, verbose=verbose, env_path=env_path)
