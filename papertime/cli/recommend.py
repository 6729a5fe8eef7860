"""Recommend command.

Ranks a saved paper pool against liked paper ids.
"""

import json
from pathlib import Path
from typing import List, Optional

import typer

from papertime.models.recommendation import RecommendRequest
from papertime.observability.context import correlation_id_context
from papertime.output.cards import render_cards
from papertime.services.config_manager import ConfigManager, DEFAULT_CONFIG_PATH
from papertime.services.recommendation_service import RecommendationService
from papertime.services.sources.base import StaticPaperSource
from papertime.cli.utils import (
    build_criteria,
    display_warning,
    handle_errors,
    load_papers,
)


@handle_errors
def recommend_command(
    papers_path: Path = typer.Argument(..., help="JSON file of feed papers"),
    liked: Optional[List[str]] = typer.Option(
        None, "--liked", "-l", help="Liked paper id (repeatable)"
    ),
    subject: Optional[List[str]] = typer.Option(
        None, "--subject", "-s", help="Subject name, e.g. 'Computer Vision'"
    ),
    paper_type: Optional[List[str]] = typer.Option(
        None, "--type", "-t", help="Paper type: Conference, Journal, Workshop, Preprint"
    ),
    query: Optional[str] = typer.Option(
        None, "--query", "-q", help="Boolean query, e.g. 'bert OR gpt'"
    ),
    top_n: Optional[int] = typer.Option(
        None, "--top-n", "-n", min=1, help="Maximum results (config default if omitted)"
    ),
    config_path: Path = typer.Option(
        Path(DEFAULT_CONFIG_PATH), "--config", "-c", help="Config file (optional)"
    ),
    key_points: bool = typer.Option(False, "--key-points", help="Show key points"),
    as_json: bool = typer.Option(False, "--json", help="Print the API response JSON"),
):
    """Rank papers by relevance to your liked papers."""
    config = ConfigManager(config_path=str(config_path)).load_or_default()
    papers = load_papers(papers_path)

    service = RecommendationService(
        StaticPaperSource(papers),
        ranking_config=config.ranking,
        settings=config.settings,
    )
    request = RecommendRequest(
        liked_paper_ids=list(liked or []),
        filters=build_criteria(subject, paper_type, query),
        max_results=top_n,
    )

    with correlation_id_context():
        response = service.recommend(request)

    if as_json:
        typer.echo(json.dumps(response.to_dict(), indent=2))
        return

    if response.message:
        display_warning(response.message)
        return

    typer.echo(f"Top {len(response.papers)} of {len(papers)} papers:\n")
    typer.echo(render_cards(response.papers, show_key_points=key_points))
