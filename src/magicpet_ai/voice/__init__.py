"""Speech capture and speech output boundaries."""

from .capture import RecognitionError, SpeechCaptureAdapter
from .interfaces import RecognitionEngine, RecognitionListener, SpeechSynthesizer
from .output import SPEECH_PITCH, SPEECH_RATE, SpeechOutputAdapter, SynthesisError

__all__ = [
    "RecognitionEngine",
    "RecognitionError",
    "RecognitionListener",
    "SPEECH_PITCH",
    "SPEECH_RATE",
    "SpeechCaptureAdapter",
    "SpeechOutputAdapter",
    "SpeechSynthesizer",
    "SynthesisError",
]
