"""
Parser utilities for extracting structured data from names and designators.
"""

from .fqdd_parser import FqddParser
from .name_parser import NameParser

__all__ = ['FqddParser', 'NameParser']
