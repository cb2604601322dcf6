"""Subcommands of the apprunner CLI."""
