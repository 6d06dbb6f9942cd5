"""
Output formatters - Strategy Pattern for different output formats.
"""

from .base_formatter import OutputFormatter
from .tree_formatter import CardTreeFormatter

__all__ = ['OutputFormatter', 'CardTreeFormatter']
