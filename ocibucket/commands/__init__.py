"""Implementations of the ``ocibucket`` CLI subcommands."""
