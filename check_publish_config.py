#!/usr/bin/env python3
"""Diagnostic script to check compile/publish configuration."""

import os
import shutil
import sys
from pathlib import Path

from move_runner.constants import (
    DEFAULT_ENV_FILE,
    MODULE_ADDRESS_ENV,
    NETWORK_ENV,
    PACKAGE_DIR,
    PUBLISHER_ADDRESS_ENV,
    PUBLISHER_PRIVATE_KEY_ENV,
)
from move_runner.env_utils import (
    UnknownNetworkError,
    load_env,
    mask_secret,
    resolve_aptos_cli,
    resolve_node_url,
)


REQUIRED_VARS = {
    PUBLISHER_ADDRESS_ENV: "Publisher account address",
    PUBLISHER_PRIVATE_KEY_ENV: "Publisher account private key",
    NETWORK_ENV: "Target network (mainnet, testnet, devnet or local)",
}


def check_env_values(values, issues):
    print("\n--- Required Variables ---")
    for var, desc in REQUIRED_VARS.items():
        value = values.get(var)
        if value:
            display = mask_secret(value) if "PRIVATE_KEY" in var else value
            print(f"  ✓ {var:40} = {display}")
        else:
            print(f"  ✗ {var:40} = NOT SET")
            issues.append(f"Missing required variable: {var} ({desc})")

    network = values.get(NETWORK_ENV)
    if network:
        try:
            print(f"\n  Node URL for {network}: {resolve_node_url(network)}")
        except UnknownNetworkError as exc:
            print(f"\n  ✗ {exc}")
            issues.append(str(exc))

    module_address = values.get(MODULE_ADDRESS_ENV)
    if module_address:
        print(f"\n  ✓ {MODULE_ADDRESS_ENV:40} = {module_address}")
    else:
        print(f"\n  ○ {MODULE_ADDRESS_ENV:40} = not set (written after publish)")


def check_package(package_dir: Path, issues):
    manifest = package_dir / "Move.toml"
    if not manifest.exists():
        print(f"\n  ✗ Move.toml NOT FOUND")
        print(f"    Expected: {manifest}")
        issues.append(f"Move package manifest missing: {manifest}")
        return

    print(f"\n  ✓ Found package manifest: {manifest}")
    build_dir = package_dir / "build"
    if build_dir.exists():
        modules = sorted(build_dir.rglob("*.mv"))
        print(f"  Found {len(modules)} compiled module(s):")
        for module in modules:
            print(f"    - {module.relative_to(package_dir)} ({module.stat().st_size} bytes)")
    else:
        print(f"  ○ build/ directory does not exist yet")
        print(f"    → Run: python compile_contract.py")


def collect_env_values(env_file: Path):
    """Resolve variables the way compile/publish do: shell exports win over .env."""

    if env_file.exists():
        print(f"\n✓ Found .env file: {env_file}")
        load_env(env_file)
    else:
        print(f"\n○ No .env file at {env_file}, using exported variables only")

    names = (*REQUIRED_VARS, MODULE_ADDRESS_ENV)
    return {name: os.getenv(name, "").strip() for name in names}


def main(env_file: Path = DEFAULT_ENV_FILE, package_dir: Path = PACKAGE_DIR):
    print("=" * 60)
    print("Move Publish Configuration Diagnostic")
    print("=" * 60)

    issues = []
    values = collect_env_values(env_file)

    print("\n" + "=" * 60)
    print("1. Environment Variables Check")
    print("=" * 60)
    check_env_values(values, issues)

    print("\n" + "=" * 60)
    print("2. Aptos CLI")
    print("=" * 60)
    aptos_cli = resolve_aptos_cli()
    cli_path = shutil.which(aptos_cli)
    if cli_path:
        print(f"\n  ✓ {aptos_cli} found: {cli_path}")
    else:
        print(f"\n  ✗ {aptos_cli} not found on PATH")
        issues.append("Aptos CLI is not installed or not in PATH")

    print("\n" + "=" * 60)
    print("3. Move Package")
    print("=" * 60)
    check_package(package_dir, issues)

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)

    if not issues:
        print("\n✅ All checks passed! Ready to compile and publish.")
        return

    print(f"\n⚠️  Found {len(issues)} issue(s) to fix:\n")
    for i, issue in enumerate(issues, 1):
        print(f"  {i}. {issue}")

    print("\n" + "-" * 60)
    print("Recommended Actions:")
    print("-" * 60)
    if any("variable" in issue for issue in issues):
        print(f"\n- Export the missing values or add them to {env_file}")
    if any("Aptos CLI" in issue for issue in issues):
        # Exported so the SDK compile wrapper sees it too, not only publish
        print("\n- Install the Aptos CLI, or export APTOS_CLI_PATH=/path/to/aptos in the shell")
    if any("manifest" in issue for issue in issues):
        print(f"\n- Place the Move package under {package_dir}/")
    sys.exit(1)


if __name__ == "__main__":
    main()
