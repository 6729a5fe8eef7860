"""Filter command.

Applies subject, type and query filters to a saved paper pool.
"""

import json
from pathlib import Path
from typing import List, Optional

import typer

from papertime.models.paper import UnscoredPaper
from papertime.output.cards import render_cards
from papertime.services.filter_service import FilterService
from papertime.cli.utils import build_criteria, display_warning, handle_errors, load_papers


@handle_errors
def filter_command(
    papers_path: Path = typer.Argument(..., help="JSON file of feed papers"),
    subject: Optional[List[str]] = typer.Option(
        None, "--subject", "-s", help="Subject name (repeatable)"
    ),
    paper_type: Optional[List[str]] = typer.Option(
        None, "--type", "-t", help="Paper type (repeatable)"
    ),
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Boolean query"),
    key_points: bool = typer.Option(False, "--key-points", help="Show key points"),
    as_json: bool = typer.Option(False, "--json", help="Print matching papers as JSON"),
):
    """List papers matching the filters, in feed order."""
    papers = load_papers(papers_path)
    service = FilterService()
    matches = service.apply_filters(papers, build_criteria(subject, paper_type, query))

    if as_json:
        typer.echo(json.dumps({"papers": [p.to_dict() for p in matches]}, indent=2))
        return

    if not matches:
        display_warning("No papers match the current filters")
        return

    stats = service.get_stats()
    typer.echo(f"{stats.papers_output} of {stats.total_papers_input} papers match:\n")
    cards = [UnscoredPaper(paper=p) for p in matches]
    typer.echo(render_cards(cards, show_key_points=key_points))
