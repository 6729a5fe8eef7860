"""Paper source backed by a saved JSON dump of the feed."""

import json
from pathlib import Path
from typing import Any, List, Union

import structlog
from pydantic import ValidationError

from papertime.models.paper import Paper
from papertime.services.sources.base import PaperSource
from papertime.utils.exceptions import PaperSourceError

logger = structlog.get_logger()


def parse_papers(data: Any) -> List[Paper]:
    """Validate raw JSON into papers.

    Accepts either a list of paper records or an object with a ``papers``
    list (the shape the API returns).
    """
    if isinstance(data, dict) and "papers" in data:
        data = data["papers"]
    if not isinstance(data, list):
        raise PaperSourceError("Expected a list of paper records")

    papers = []
    for position, record in enumerate(data):
        try:
            papers.append(Paper.model_validate(record))
        except ValidationError as e:
            raise PaperSourceError(f"Invalid paper record at index {position}: {e}")
    return papers


class JsonFilePaperSource(PaperSource):
    """Reads the pool from a JSON file on every fetch."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return f"json_file:{self.path.name}"

    def fetch_papers(self) -> List[Paper]:
        if not self.path.exists():
            raise PaperSourceError(f"Papers file not found: {self.path}", source=self.name)

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PaperSourceError(f"Failed to read papers file: {e}", source=self.name)

        papers = parse_papers(data)
        logger.info("papers_loaded", source=self.name, count=len(papers))
        return papers
