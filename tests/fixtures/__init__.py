"""
Test fixtures package for YoBit client tests.
"""

from . import api_responses

__all__ = ["api_responses"]
