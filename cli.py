from __future__ import annotations

import shutil
from pathlib import Path
import typer
from rich.console import Console
from rich.progress import Progress

from config import SETTINGS
from translator.base import ContentType
from translator.errors import TranslationError
from translator.factory import get_available_engines
from translator.manager import TranslationManager
from utils.logging_config import configure_logging

app = typer.Typer(add_completion=False)
console = Console()

HTML_SUFFIXES = {".html", ".htm", ".xhtml"}


def resolve_content_type(fmt: str, path: Path) -> ContentType:
    if fmt.lower() == "auto":
        return ContentType.HTML if path.suffix.lower() in HTML_SUFFIXES else ContentType.PLAIN
    return ContentType.parse(fmt)


@app.command(help="Translate a plain text or HTML file")
def translate(
    input: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    output: Path = typer.Argument(...),
    source: str = typer.Option(SETTINGS.default_source_lang, "--source", "-s"),
    target: str = typer.Option(SETTINGS.default_target_lang, "--target", "-t"),
    fmt: str = typer.Option("auto", "--format", "-f", help="plain, html or auto (by file suffix)"),
    engine: str = typer.Option("azure", "--engine", "-e"),
    category: str = typer.Option(SETTINGS.translator.category, help="Translator category (custom model id)"),
    backup: bool = typer.Option(False, help="Create a .bak file next to the source"),
    log_file: Path | None = typer.Option(None, help="Write DEBUG logs to this file (default: DOCLOCALIZER_LOG)"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    configure_logging(log_file, verbose=verbose)
    try:
        content_type = resolve_content_type(fmt, input)
    except TranslationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    if backup:
        shutil.copyfile(input, input.with_suffix(input.suffix + ".bak"))

    content = input.read_text(encoding="utf-8")
    manager = TranslationManager(SETTINGS, engine=engine)
    with Progress(console=console) as progress:
        task_id = progress.add_task(f"Translating {input.name}", total=None)

        def progress_callback(done: int, total: int) -> None:
            progress.update(task_id, completed=done, total=total)

        try:
            translated = manager.translate(
                content,
                source,
                target,
                content_type,
                category=category,
                progress_cb=progress_callback,
            )
        except (TranslationError, ValueError) as exc:
            console.print(f"[red]Translation failed:[/red] {exc}")
            raise typer.Exit(code=1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(translated, encoding="utf-8")
    console.print(f"Saved {content_type.value} translation ({source} -> {target}) to {output}")


@app.command(help="List available translation engines")
def engines() -> None:
    for key, label in get_available_engines().items():
        console.print(f"{key}\t{label}")


if __name__ == "__main__":
    app()
