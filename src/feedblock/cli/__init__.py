"""
CLI Command Modules

Each module contains a logical group of related commands.
"""

from feedblock.cli import limits

__all__ = ['limits']
