"""Unit tests for paper sources"""

import json

import pytest

from papertime.services.sources.base import StaticPaperSource
from papertime.services.sources.json_file import JsonFilePaperSource, parse_papers
from papertime.utils.exceptions import PaperSourceError


RECORDS = [
    {
        "id": "2401.00001",
        "title": "Graph networks",
        "summary": "Message passing",
        "authors": ["A. Author"],
        "published": "2024-01-02T00:00:00Z",
        "categories": ["cs.LG"],
    },
    {
        "id": "2401.00002",
        "title": "Speech models",
        "summary": "Audio",
        "published": "2024-01-03T00:00:00Z",
    },
]


def test_reads_list(tmp_path):
    path = tmp_path / "papers.json"
    path.write_text(json.dumps(RECORDS))

    papers = JsonFilePaperSource(path).fetch_papers()

    assert [p.paper_id for p in papers] == ["2401.00001", "2401.00002"]
    assert papers[1].authors == []


def test_reads_api_response_shape(tmp_path):
    path = tmp_path / "papers.json"
    path.write_text(json.dumps({"papers": RECORDS}))

    assert len(JsonFilePaperSource(path).fetch_papers()) == 2


def test_missing_file(tmp_path):
    source = JsonFilePaperSource(tmp_path / "missing.json")

    with pytest.raises(PaperSourceError, match="not found") as exc_info:
        source.fetch_papers()
    assert exc_info.value.source == "json_file:missing.json"


def test_invalid_json(tmp_path):
    path = tmp_path / "papers.json"
    path.write_text("{not json")

    with pytest.raises(PaperSourceError, match="Failed to read"):
        JsonFilePaperSource(path).fetch_papers()


def test_invalid_record():
    with pytest.raises(PaperSourceError, match="index 1"):
        parse_papers([RECORDS[0], {"title": "missing id"}])


def test_wrong_shape():
    with pytest.raises(PaperSourceError, match="list"):
        parse_papers({"items": []})


def test_static_source_returns_copy(make_paper):
    papers = [make_paper("a"), make_paper("b")]
    source = StaticPaperSource(papers)

    fetched = source.fetch_papers()
    fetched.pop()

    assert len(source.fetch_papers()) == 2
    assert source.name == "static"
