from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.progress import Progress

from .config import SETTINGS
from .errors import ConfigError
from .translator.factory import build_translator, get_available_engines
from .translator.orchestrator import TranslationOrchestrator
from .utils.logging_config import configure_logging

app = typer.Typer(add_completion=False)
console = Console()
err_console = Console(stderr=True)


def _run_async(coro):
    return asyncio.run(coro)


def _read_texts(texts: List[str], file: Path | None) -> List[str]:
    collected = list(texts)
    if file is not None:
        collected.extend(file.read_text(encoding="utf-8").splitlines())
    return collected


@app.command(help="Translate texts given as arguments or read from a file, one per line")
def translate(
    texts: Optional[List[str]] = typer.Argument(None, help="Texts to translate"),
    target: str = typer.Option(..., "--target", "-t", help="Target language code or name"),
    source: Optional[str] = typer.Option(SETTINGS.default_source_lang, "--source", "-s", help="Source language"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, readable=True, help="Read texts from a file"),
    engine: str = typer.Option(SETTINGS.default_engine, "--engine", "-e"),
    html: bool = typer.Option(False, "--html", help="Treat texts as HTML"),
    model: Optional[str] = typer.Option(None, help="Translation model"),
    batch_size: Optional[int] = typer.Option(None, "--batch-size", help="Maximum texts per request"),
    concurrency: Optional[int] = typer.Option(None, "--concurrency", help="Maximum concurrent requests"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Per-request timeout in seconds"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Override the Google Translate API key"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write debug logs to this file"),
) -> None:
    configure_logging(log_file, level="WARNING")
    items = _read_texts(texts or [], file)
    if not items:
        err_console.print("[red]Nothing to translate[/red]")
        raise typer.Exit(code=1)

    options = {
        "target": target,
        "source": source,
        "html": html,
        "model": model,
        "batch_size": batch_size,
        "concurrency": concurrency,
        "timeout": timeout,
        "api_key": api_key,
    }

    async def runner():
        translator = build_translator(engine, api_key=api_key)
        async with TranslationOrchestrator(translator) as orchestrator:
            with Progress(console=err_console, transient=True) as progress:
                task_id = progress.add_task("Translating", total=len(items))

                def progress_callback(done: int, total: int) -> None:
                    progress.update(task_id, completed=done, total=total)

                return await orchestrator.translate(items, options, progress_cb=progress_callback)

    try:
        translations = _run_async(runner())
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=2)

    for line in translations:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


@app.command(help="List the available translation engines")
def engines() -> None:
    for name, label in get_available_engines().items():
        console.print(f"{name}\t{label}", markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
