#!/usr/bin/env python3
"""Compile the Move package in ``contract/`` with the publisher's named address.

Delegates to ``move_runner.compiler``; configuration is read from ``.env``.
"""

from __future__ import annotations

from move_runner.compiler import main


if __name__ == "__main__":
    main()
