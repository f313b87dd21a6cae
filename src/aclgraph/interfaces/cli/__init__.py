"""Command line entry points."""

from aclgraph.interfaces.cli.commands import build_parser, run_command

__all__ = ["build_parser", "run_command"]
