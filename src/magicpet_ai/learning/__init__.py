"""Learning advice, word suggestions and pronunciation scoring."""

from .completion import ChatCompletionClient, CompletionError
from .providers import ContentProvider, RemoteProvider, StaticProvider, build_provider
from .scoring import evaluate_pronunciation
from .service import CompletionService

__all__ = [
    "ChatCompletionClient",
    "CompletionError",
    "CompletionService",
    "ContentProvider",
    "RemoteProvider",
    "StaticProvider",
    "build_provider",
    "evaluate_pronunciation",
]
