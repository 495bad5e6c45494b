"""CLI startup entrypoint for MagicPet AI."""

from __future__ import annotations

import asyncio

import typer
from rich import print

from magicpet_ai.assistant import MagicPetAssistant, build_assistant
from magicpet_ai.config import settings
from magicpet_ai.learning import CompletionService, evaluate_pronunciation
from magicpet_ai.telemetry.logging import configure_logging
from magicpet_ai.voice import RecognitionError, SynthesisError

app = typer.Typer(help="MagicPet AI voice and vocabulary helpers")


@app.callback()
def main(log_level: str = typer.Option(None, help="Override MAGICPET_LOG_LEVEL")) -> None:
    configure_logging(log_level or settings.log_level)


@app.command()
def start() -> None:
    """Show runtime configuration (secrets reported as configured or not)."""
    print(
        {
            "app_name": settings.app_name,
            "completion_configured": settings.completion_configured,
            "openai_model": settings.openai_model,
            "minimax_configured": bool(settings.minimax_api_key and settings.minimax_group_id),
            "proxy": f"http://{settings.proxy_host}:{settings.proxy_port}{settings.proxy_path}",
        }
    )


@app.command()
def serve(
    host: str = typer.Option(None, help="Bind address"),
    port: int = typer.Option(None, help="Bind port"),
) -> None:
    """Run the transcription proxy."""
    import uvicorn

    from magicpet_ai.transcription import create_app

    uvicorn.run(
        create_app(),
        host=host or settings.proxy_host,
        port=port or settings.proxy_port,
        log_level=settings.log_level.lower(),
    )


@app.command()
def advice(word: str, level: str = typer.Option("beginner", help="Learner level")) -> None:
    """Print encouragement for a learned word."""

    async def _run() -> dict:
        service = CompletionService()
        try:
            return (await service.get_learning_advice(word, level)).as_dict()
        finally:
            await service.aclose()

    print(asyncio.run(_run()))


@app.command("next-word")
def next_word(
    difficulty: str = typer.Option("easy", help="easy/medium/hard"),
    learned: list[str] = typer.Option(None, "--learned", "-l", help="Words already learned"),
) -> None:
    """Suggest the next word to learn."""

    async def _run() -> dict:
        service = CompletionService()
        try:
            return (await service.get_next_word(learned or [], difficulty)).as_dict()
        finally:
            await service.aclose()

    print(asyncio.run(_run()))


@app.command()
def evaluate(
    recognized: str,
    target: str,
    confidence: float = typer.Option(0.9, min=0.0, max=1.0, help="Recognizer confidence"),
) -> None:
    """Score a recognized utterance against a target word."""
    print(evaluate_pronunciation(recognized, target, confidence).as_dict())


@app.command()
def say(text: str, lang: str = typer.Option("en-US", help="Utterance language tag")) -> None:
    """Pronounce a word or sentence."""
    assistant = build_assistant(with_capture=False)

    async def _run() -> dict:
        try:
            return (await assistant.speak_word(text, lang)).as_dict()
        finally:
            await assistant.aclose()

    try:
        outcome = asyncio.run(_run())
    except SynthesisError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)
    print(outcome)


@app.command()
def listen() -> None:
    """Capture one utterance from the microphone."""
    assistant = build_assistant()
    if not assistant.is_speech_supported():
        print({"error": "Speech capture is unavailable. Install with: pip install 'magicpet-ai[voice]'"})
        raise typer.Exit(code=1)
    try:
        result = asyncio.run(assistant.start_listening())
    except RecognitionError as exc:
        print({"error": exc.code})
        raise typer.Exit(code=1)
    print(result.as_dict())


@app.command()
def practice(word: str, speak_feedback: bool = typer.Option(True, help="Read the feedback aloud")) -> None:
    """Say a word, hear the child repeat it, then score and encourage."""
    assistant = build_assistant()
    if not assistant.is_speech_supported():
        print({"error": "Speech capture is unavailable. Install with: pip install 'magicpet-ai[voice]'"})
        raise typer.Exit(code=1)

    try:
        outcome = asyncio.run(_practice(assistant, word, speak_feedback=speak_feedback))
    except RecognitionError as exc:
        print({"word": word, "error": exc.code})
        raise typer.Exit(code=1)
    print(outcome)


async def _practice(assistant: MagicPetAssistant, word: str, *, speak_feedback: bool) -> dict:
    try:
        await _speak_quietly(assistant, word)
        heard = await assistant.start_listening()
        evaluation = assistant.evaluate_pronunciation(heard.text, word, heard.confidence)
        outcome = {"heard": heard.text, **evaluation.as_dict()}
        if evaluation.is_correct:
            outcome["advice"] = (await assistant.get_learning_advice(word)).advice
        if speak_feedback:
            await _speak_quietly(assistant, evaluation.feedback)
        return outcome
    finally:
        await assistant.aclose()


async def _speak_quietly(assistant: MagicPetAssistant, text: str) -> None:
    try:
        await assistant.speak_word(text)
    except SynthesisError as exc:
        print({"speech_output": "skipped", "error": str(exc)})


if __name__ == "__main__":
    app()
