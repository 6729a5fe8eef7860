"""Shared CLI utilities.

Provides common functionality for all CLI commands.
"""

import functools
import os
from pathlib import Path
from typing import Callable, List, Optional, TypeVar

import structlog
import typer

from papertime.models.filters import SUBJECT_CATEGORIES, FilterCriteria, PaperType
from papertime.models.paper import Paper
from papertime.observability.logging import configure_logging
from papertime.services.sources.json_file import JsonFilePaperSource
from papertime.utils.exceptions import InvalidInputError, PaperSourceError

# CLI output goes to stdout; logs stay quiet on stderr unless asked for
configure_logging(level=os.environ.get("PAPERTIME_LOG_LEVEL", "WARNING"), json_output=False)
logger = structlog.get_logger()

# Type variable for decorator
F = TypeVar("F", bound=Callable)


def load_papers(papers_path: Path) -> List[Paper]:
    """Load a paper pool from a JSON dump.

    Raises:
        typer.Exit: If the file cannot be read or validated.
    """
    try:
        return JsonFilePaperSource(papers_path).fetch_papers()
    except PaperSourceError as e:
        typer.secho(f"Papers Error: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)


def build_criteria(
    subjects: Optional[List[str]],
    paper_types: Optional[List[str]],
    query: Optional[str],
) -> FilterCriteria:
    """Turn repeated CLI options into filter criteria.

    Unlike the filter service, unknown subject and type labels are rejected.

    Raises:
        InvalidInputError: If a subject or paper type label is not recognised.
    """
    for label in subjects or ():
        if label not in SUBJECT_CATEGORIES:
            known = ", ".join(SUBJECT_CATEGORIES)
            raise InvalidInputError(f"Unknown subject '{label}' (expected one of: {known})")
    for label in paper_types or ():
        if PaperType.from_label(label) is None:
            known = ", ".join(t.value for t in PaperType)
            raise InvalidInputError(f"Unknown paper type '{label}' (expected one of: {known})")

    return FilterCriteria(
        subjects=tuple(subjects or ()),
        paper_types=tuple(paper_types or ()),
        boolean_query=query or "",
    )


def handle_errors(func: F) -> F:
    """Decorator for consistent error handling.

    Catches exceptions and displays user-friendly error messages.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            logger.exception("command_failed")
            typer.secho(f"Error: {e}", fg=typer.colors.RED)
            raise typer.Exit(code=1)

    return wrapper  # type: ignore[return-value]


def display_success(message: str) -> None:
    typer.secho(message, fg=typer.colors.GREEN)


def display_warning(message: str) -> None:
    typer.secho(message, fg=typer.colors.YELLOW)


def display_error(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED)


def display_info(message: str) -> None:
    typer.secho(message, fg=typer.colors.CYAN)
