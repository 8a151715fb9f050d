"""Shared fixtures: isolate every test from the developer's GCD_TOOL_* settings."""

import pytest
from gcd_tool.core.env import FORMAT_VAR, VERBOSE_VAR


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so monkeypatch restores the original state even when load_env() writes the key
    for name in (FORMAT_VAR, VERBOSE_VAR):
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
