from __future__ import annotations

import importlib
import sys
import types

import pytest

from magicpet_ai.config import Settings


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("magicpet_ai.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_evaluate_command_prints_score() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from magicpet_ai.main import app

    result = typer_testing.CliRunner().invoke(app, ["evaluate", "Dog", "dog", "--confidence", "0.95"])

    assert result.exit_code == 0
    assert "95" in result.stdout
    assert "Perfect" in result.stdout


def test_next_word_without_key_uses_word_list(monkeypatch) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from magicpet_ai.main import app

    monkeypatch.setattr("magicpet_ai.learning.service.settings", Settings(_env_file=None, openai_api_key=None))
    monkeypatch.setattr("magicpet_ai.content.fallback.random.choice", lambda options: options[0])

    result = typer_testing.CliRunner().invoke(app, ["next-word", "--difficulty", "hard", "-l", "cat"])

    assert result.exit_code == 0
    assert "adventure" in result.stdout


def _missing_voice_backends(monkeypatch) -> None:
    fake_stt = types.ModuleType("magicpet_ai.voice.stt_speechrecognition")
    fake_tts = types.ModuleType("magicpet_ai.voice.tts_pyttsx3")

    class _MissingBackend:
        def __init__(self, *args, **kwargs) -> None:
            raise RuntimeError("Voice backend missing. Install with: pip install 'magicpet-ai[voice]'")

    fake_stt.SpeechRecognitionEngine = _MissingBackend
    fake_tts.Pyttsx3Synthesizer = _MissingBackend
    monkeypatch.setitem(sys.modules, "magicpet_ai.voice.stt_speechrecognition", fake_stt)
    monkeypatch.setitem(sys.modules, "magicpet_ai.voice.tts_pyttsx3", fake_tts)


def test_listen_reports_missing_voice_backend(monkeypatch) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from magicpet_ai.main import app

    _missing_voice_backends(monkeypatch)

    result = typer_testing.CliRunner().invoke(app, ["listen"], catch_exceptions=False)

    assert result.exit_code == 1
    assert "unavailable" in result.stdout
    assert "magicpet-ai[voice]" in result.stdout


def test_say_reports_missing_speech_output(monkeypatch) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from magicpet_ai.main import app

    _missing_voice_backends(monkeypatch)

    result = typer_testing.CliRunner().invoke(app, ["say", "hello"], catch_exceptions=False)

    assert result.exit_code == 1
    assert "not available" in result.stdout
