"""Server-side proxy to the Minimax speech-to-text API."""

from .app import create_app
from .minimax import MinimaxSpeechClient, normalize_language
from .proxy import (
    ConfigurationError,
    InternalServerError,
    MethodNotAllowed,
    ProxyError,
    RecognitionFailed,
    TranscriptionProxy,
    UpstreamError,
)

__all__ = [
    "ConfigurationError",
    "InternalServerError",
    "MethodNotAllowed",
    "MinimaxSpeechClient",
    "ProxyError",
    "RecognitionFailed",
    "TranscriptionProxy",
    "UpstreamError",
    "create_app",
    "normalize_language",
]
