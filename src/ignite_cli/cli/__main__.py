# SPDX-FileCopyrightText: 2026 ignite-cli contributors
#
# SPDX-License-Identifier: Apache-2.0

"""CLI entry point for ``python -m ignite_cli.cli``."""

from .main import main

if __name__ == "__main__":
    main()
