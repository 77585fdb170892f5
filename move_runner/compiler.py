"""Compile the Move package through the Aptos SDK's CLI wrapper."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from aptos_sdk.account_address import AccountAddress
from aptos_sdk.aptos_cli_wrapper import AptosCLIWrapper

from .constants import (
    DEFAULT_ENV_FILE,
    FRAMEWORK_ADDRESS,
    MODULE_NAMED_ADDRESS,
    PACKAGE_DIR,
    PUBLISHER_ADDRESS_ENV,
)
from .env_utils import load_env, require_env
from .logging_utils import get_logger


def build_named_addresses(publisher_address: str) -> Dict[str, AccountAddress]:
    framework = AccountAddress.from_str_relaxed(FRAMEWORK_ADDRESS)
    return {
        # The dapp module lives under the publisher account
        MODULE_NAMED_ADDRESS: AccountAddress.from_str_relaxed(publisher_address),
        "std": framework,
        "aptos_stdlib": framework,
    }


def compile_package(
    package_dir: Path = PACKAGE_DIR,
    env_file: Path = DEFAULT_ENV_FILE,
) -> Dict[str, AccountAddress]:
    """Compile ``package_dir`` with the publisher address bound to ``iot_dapp``.

    Raises ``MissingEnvironmentError`` before touching the CLI when the
    publisher address is not configured. Compiler failures surface as the
    SDK's ``CLIError``, which carries the compiler output. On success the
    wrapper discards that output, so only the build directory is reported.
    """

    logger = get_logger()
    load_env(env_file)

    publisher_address = require_env(PUBLISHER_ADDRESS_ENV, "publisher account address")
    named_addresses = build_named_addresses(publisher_address)

    logger.info(
        "Compiling %s with named addresses: %s",
        package_dir,
        ", ".join(f"{name}={addr}" for name, addr in named_addresses.items()),
    )
    AptosCLIWrapper.compile_package(str(package_dir), named_addresses)
    logger.info("Compilation finished, artifacts in %s", Path(package_dir) / "build")
    return named_addresses


def main() -> None:
    compile_package(PACKAGE_DIR, DEFAULT_ENV_FILE)


if __name__ == "__main__":
    main()
