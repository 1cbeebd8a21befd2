# src/validator_shell/__init__.py
"""Command line shell around the grammar validator."""

__version__ = "1.0.0"
