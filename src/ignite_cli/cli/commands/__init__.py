# SPDX-FileCopyrightText: 2026 ignite-cli contributors
#
# SPDX-License-Identifier: Apache-2.0

"""CLI command modules.

Each module exposes ``register(subparsers)`` to add its argument parsers
and ``dispatch(args) -> int | None`` to handle parsed arguments. The
dispatch function returns the exit status if it handled the command, or
``None`` if the command belongs to another module.
"""
