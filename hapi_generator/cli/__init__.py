"""
CLI module for the hapi composer generator.

This module provides the command-line interface, including the main entry
point that is installed as the ``hapi-composer`` console script.
"""

from .commands import main

__all__ = ["main"]
