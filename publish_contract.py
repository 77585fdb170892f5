#!/usr/bin/env python3
"""Publish the Move package with the aptos CLI and record MODULE_ADDRESS in .env.

Delegates to ``move_runner.publisher``. CLI output is printed and also written
to ``move_publish_results.log``.
"""

from __future__ import annotations

from move_runner.publisher import main


if __name__ == "__main__":
    main()
