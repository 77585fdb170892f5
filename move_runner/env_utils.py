from __future__ import annotations

import os
import re
from pathlib import Path

from dotenv import load_dotenv

from .constants import APTOS_CLI_ENV, DEFAULT_APTOS_CLI, NETWORK_TO_NODE_API


class MissingEnvironmentError(RuntimeError):
    """A required variable is absent from both the process env and .env."""


class UnknownNetworkError(ValueError):
    """``APP_NETWORK`` names a network with no known node endpoint."""


def load_env(path: Path) -> bool:
    """Load ``path`` into ``os.environ``.

    Values already exported in the shell win over the file, the same way
    ``require("dotenv").config()`` behaves. Returns False when no file exists.
    """

    if not path.exists():
        return False
    return load_dotenv(path, override=False)


def require_env(name: str, description: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise MissingEnvironmentError(
            f"{name} variable is not set, make sure you have set the {description}"
        )
    return value


def resolve_node_url(network: str) -> str:
    key = network.strip().lower()
    try:
        return NETWORK_TO_NODE_API[key]
    except KeyError:
        supported = ", ".join(sorted(NETWORK_TO_NODE_API))
        raise UnknownNetworkError(
            f"Unknown network {network!r}; expected one of: {supported}"
        ) from None


def upsert_env_entry(content: str, key: str, value: str) -> str:
    """Replace the first ``KEY=...`` line in ``content`` or append one.

    Only a line that starts with exactly ``KEY=`` matches, so ``export KEY=``
    or ``OTHER_KEY=`` lines are left alone. The file's line ending (``\\n`` or
    ``\\r\\n``) is kept on the replaced line and reused for an appended one.
    """

    pattern = re.compile(rf"^{re.escape(key)}=[^\r\n]*", re.MULTILINE)
    new_entry = f"{key}={value}"

    if pattern.search(content):
        # Callable replacement keeps backslashes in the value literal
        return pattern.sub(lambda _match: new_entry, content, count=1)

    newline = "\r\n" if "\r\n" in content else "\n"
    if content and not content.endswith("\n"):
        content += newline
    return f"{content}{new_entry}{newline}"


def update_env_file(path: Path, key: str, value: str) -> None:
    # newline="" keeps \r\n intact on both read and write
    content = ""
    if path.exists():
        with path.open("r", encoding="utf-8", newline="") as handle:
            content = handle.read()
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(upsert_env_entry(content, key, value))


def resolve_aptos_cli() -> str:
    """Return the aptos binary, read after ``load_env`` so ``.env`` can set it."""

    return os.getenv(APTOS_CLI_ENV, "").strip() or DEFAULT_APTOS_CLI


def mask_secret(value: str) -> str:
    return f"{value[:8]}...{value[-4:]}" if len(value) > 12 else "***"
