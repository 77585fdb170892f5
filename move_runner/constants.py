from __future__ import annotations

from pathlib import Path
from typing import Dict


BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_ENV_FILE = BASE_DIR / ".env"
PACKAGE_DIR = BASE_DIR / "contract"
LOG_FILE = BASE_DIR / "move_publish_results.log"

LOGGER_NAME = "move_runner"

# Env keys read from .env
PUBLISHER_ADDRESS_ENV = "MODULE_PUBLISHER_ACCOUNT_ADDRESS"
PUBLISHER_PRIVATE_KEY_ENV = "MODULE_PUBLISHER_ACCOUNT_PRIVATE_KEY"
NETWORK_ENV = "APP_NETWORK"

# Env key written back after a successful publish
MODULE_ADDRESS_ENV = "MODULE_ADDRESS"

MODULE_NAMED_ADDRESS = "iot_dapp"
FRAMEWORK_ADDRESS = "0x1"

# Same variable aptos_sdk.aptos_cli_wrapper honours
APTOS_CLI_ENV = "APTOS_CLI_PATH"
DEFAULT_APTOS_CLI = "aptos"

NETWORK_TO_NODE_API: Dict[str, str] = {
    "mainnet": "https://api.mainnet.aptoslabs.com/v1",
    "testnet": "https://api.testnet.aptoslabs.com/v1",
    "devnet": "https://api.devnet.aptoslabs.com/v1",
    "local": "http://127.0.0.1:8080/v1",
}


__all__ = [
    "BASE_DIR",
    "DEFAULT_ENV_FILE",
    "PACKAGE_DIR",
    "LOG_FILE",
    "LOGGER_NAME",
    "PUBLISHER_ADDRESS_ENV",
    "PUBLISHER_PRIVATE_KEY_ENV",
    "NETWORK_ENV",
    "MODULE_ADDRESS_ENV",
    "MODULE_NAMED_ADDRESS",
    "FRAMEWORK_ADDRESS",
    "APTOS_CLI_ENV",
    "DEFAULT_APTOS_CLI",
    "NETWORK_TO_NODE_API",
]
