# src/grammar_validator/__init__.py
"""Tokenizer and structural validator for the minimal HTML grammar."""

__version__ = "1.0.0"
