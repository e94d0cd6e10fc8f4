"""Library layer for the ignite CLI.

Command modules under ``ignite_cli.cli.commands`` call into these helpers;
nothing here reads ``sys.argv`` or prints usage text.
"""
