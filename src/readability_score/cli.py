from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

import typer
import yaml

from .config import ReadabilityConfig, load_config
from .models import Document
from .pipeline import analyze_corpus, build_report
from .reporting import (
    INVALID_SELECTION_MESSAGE,
    DocumentSummary,
    build_summary,
    format_report,
    format_stats,
)
from .selection import InvalidIndexSelectionError, parse_selection

logger = logging.getLogger(__name__)

app = typer.Typer(help="Readability Score CLI.", no_args_is_help=True)

INDEX_PROMPT = "Enter the score you want to calculate (ARI, FK, SMOG, CL, all)"

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@app.callback()
def main_callback(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (e.g. DEBUG, INFO, WARNING)."
    ),
) -> None:
    """Compute ARI, Flesch-Kincaid, SMOG and Coleman-Liau scores for text."""
    if log_level:
        level = log_level.upper()
        if level not in LOG_LEVELS:
            raise typer.BadParameter(
                f"Unknown log level '{log_level}'.", param_hint="--log-level"
            )
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    index: str | None = typer.Option(
        None,
        "--index",
        "-i",
        help="Index to report: ARI, FK, SMOG, CL or all. Prompted when omitted.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    json_output: bool = typer.Option(
        False, "--json", help="Emit a JSON summary instead of console text."
    ),
    show_text: bool | None = typer.Option(
        None,
        "--show-text/--hide-text",
        help="Override config show_text flag.",
    ),
) -> None:
    """Print text statistics and the selected readability scores."""
    cfg = load_config(config)
    if show_text is not None:
        cfg.show_text = show_text
    documents = _load_documents(input_path)
    results = analyze_corpus(documents, cfg)

    if json_output:
        # JSON mode never prompts so the output stays machine readable.
        selection = index if index is not None else cfg.default_index
        _ensure_valid_selection(selection)
        summary: List[DocumentSummary] = [
            build_summary(analysis, build_report(analysis, selection))
            for _, analysis in sorted(results.items())
        ]
        typer.echo(json.dumps({"documents": summary}, indent=2))
        return

    for doc_id, analysis in sorted(results.items()):
        if len(results) > 1:
            typer.echo(f"== {doc_id}")
        for line in format_stats(analysis, show_text=cfg.show_text):
            typer.echo(line)
        typer.echo("")

    selection = index
    if selection is None:
        selection = typer.prompt(INDEX_PROMPT, default=cfg.default_index)
    _ensure_valid_selection(selection)

    for doc_id, analysis in sorted(results.items()):
        typer.echo("")
        if len(results) > 1:
            typer.echo(f"== {doc_id}")
        report = build_report(analysis, selection)
        for line in format_report(report, precision=cfg.score_precision):
            typer.echo(line)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _ensure_valid_selection(selection: str) -> None:
    """Exit with status 2 before any score is reported for an unknown index."""
    try:
        parse_selection(selection)
    except InvalidIndexSelectionError as exc:
        logger.debug("Rejected selection %r", exc.token)
        typer.echo(INVALID_SELECTION_MESSAGE, err=True)
        raise typer.Exit(code=2) from exc


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    # Directory input: gather all supported files in a deterministic order.
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    if not files:
        logger.warning("No .txt files found under %s.", input_path)
        raise typer.BadParameter(f"No .txt files found under {input_path}.")
    return [
        _document_from_file(file, str(file.relative_to(input_path))) for file in files
    ]


def _document_from_file(path: Path, doc_id: str) -> Document:
    """Read a plain-text file from disk and wrap it in a Document."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


if __name__ == "__main__":
    main()
