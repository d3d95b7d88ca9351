"""
Mock utilities package for YoBit client tests.
"""

from .transport_mocks import RecordedRequest, RecordingTransport

__all__ = ["RecordedRequest", "RecordingTransport"]
