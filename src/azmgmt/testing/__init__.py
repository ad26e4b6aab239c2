"""Helpers for exercising azmgmt clients against recorded or live endpoints."""

from .context import DEFAULT_LOCATION, ScenarioContext, SharedContext, resolve_test_location
from .recorded import RecordedResponse, RecordedTransport, RecordingConfigError, load_recording

__all__ = [
    "DEFAULT_LOCATION",
    "RecordedResponse",
    "RecordedTransport",
    "RecordingConfigError",
    "ScenarioContext",
    "SharedContext",
    "load_recording",
    "resolve_test_location",
]
