import os
import sys

import pytest


def pytest_configure():
    # Ensure the repo root is importable for `move_runner.*` without an install
    root = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    if root not in sys.path:
        sys.path.insert(0, root)


MANAGED_VARS = (
    "MODULE_PUBLISHER_ACCOUNT_ADDRESS",
    "MODULE_PUBLISHER_ACCOUNT_PRIVATE_KEY",
    "APP_NETWORK",
    "MODULE_ADDRESS",
    "APTOS_CLI_PATH",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    # setenv first so values later loaded from a .env file are undone too
    for name in MANAGED_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
