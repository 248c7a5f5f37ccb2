"""
Mock implementations for testing.

Provides:
- RecordingPersistence: In-memory PersistenceClient with call recording
  and failure injection
"""

from tests.mocks.recording_persistence import RecordingPersistence

__all__ = ["RecordingPersistence"]
