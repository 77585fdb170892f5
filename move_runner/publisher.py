from __future__ import annotations

import datetime
import shlex
import subprocess
from pathlib import Path
from typing import List, Sequence

from .constants import (
    BASE_DIR,
    DEFAULT_APTOS_CLI,
    DEFAULT_ENV_FILE,
    LOG_FILE,
    MODULE_ADDRESS_ENV,
    MODULE_NAMED_ADDRESS,
    NETWORK_ENV,
    PACKAGE_DIR,
    PUBLISHER_ADDRESS_ENV,
    PUBLISHER_PRIVATE_KEY_ENV,
)
from .env_utils import (
    load_env,
    mask_secret,
    require_env,
    resolve_aptos_cli,
    resolve_node_url,
    update_env_file,
)
from .logging_utils import get_logger, log_section


def build_publish_command(
    package_dir: Path,
    publisher_address: str,
    private_key: str,
    node_url: str,
    aptos_cli: str = DEFAULT_APTOS_CLI,
) -> List[str]:
    return [
        aptos_cli,
        "move",
        "publish",
        "--package-dir",
        str(package_dir),
        "--named-addresses",
        f"{MODULE_NAMED_ADDRESS}={publisher_address}",
        "--private-key",
        private_key,
        "--url",
        node_url,
        # No stdin is attached, so skip the gas confirmation prompt
        "--assume-yes",
    ]


def format_command(args: Sequence[str]) -> str:
    """Shell-quote ``args`` for display with the private key masked."""

    shown = list(args)
    for idx, token in enumerate(shown[:-1]):
        if token == "--private-key":
            shown[idx + 1] = mask_secret(shown[idx + 1])
    return shlex.join(shown)


def publish_package(
    package_dir: Path = PACKAGE_DIR,
    env_file: Path = DEFAULT_ENV_FILE,
    log_file: Path = LOG_FILE,
) -> bool:
    """Publish ``package_dir`` with the aptos CLI and record ``MODULE_ADDRESS``.

    Missing or invalid configuration raises before the CLI is spawned. A
    failing publish command is logged and reported through the return value
    only; the env file is rewritten only when the command exits with 0.
    """

    logger = get_logger()
    load_env(env_file)

    publisher_address = require_env(PUBLISHER_ADDRESS_ENV, "publisher account address")
    private_key = require_env(PUBLISHER_PRIVATE_KEY_ENV, "publisher account private key")
    network = require_env(NETWORK_ENV, "target network (mainnet, testnet, devnet or local)")
    node_url = resolve_node_url(network)
    aptos_cli = resolve_aptos_cli()

    command = build_publish_command(package_dir, publisher_address, private_key, node_url, aptos_cli)
    display = format_command(command)

    logger.info("Publishing %s to %s (%s)", package_dir, network, node_url)
    print(f"→ {display}")
    print(f"Logging detailed output to {log_file}")

    with log_file.open("w", encoding="utf-8") as log:
        log.write(f"Run started at {datetime.datetime.now(datetime.timezone.utc).isoformat()}\n")
        log.write(f"Working directory: {BASE_DIR}\n")
        log.write(f"Network: {network} ({node_url})\n")
        log.write(f"Command: {display}\n")
        log.write("=" * 80 + "\n")

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                cwd=str(BASE_DIR),
                check=False,
            )
        except OSError as exc:
            log_section(log, "Execution failed", repr(exc))
            logger.error("Could not start %s: %s", aptos_cli, exc)
            return False

        stdout = result.stdout or ""
        stderr = result.stderr or ""
        log.write(f"Exit code: {result.returncode}\n")
        log_section(log, "STDOUT:", stdout if stdout else "<empty>")
        log_section(log, "STDERR:", stderr if stderr else "<empty>")

        if result.returncode != 0:
            logger.error("Publish failed with exit code %s. See %s for details.", result.returncode, log_file)
            return False

        update_env_file(env_file, MODULE_ADDRESS_ENV, publisher_address)
        log_section(log, "Result: updated env file", f"{MODULE_ADDRESS_ENV}={publisher_address} in {env_file}")

    logger.info("Publish completed")
    return True


def main() -> None:
    # Command failures are reported but keep a zero exit status
    publish_package(PACKAGE_DIR, DEFAULT_ENV_FILE, LOG_FILE)


if __name__ == "__main__":
    main()
