"""Tests for markdown paper cards"""

import pytest

from papertime.models.paper import PaperScores, ScoredPaper, UnscoredPaper
from papertime.output.cards import pdf_url, paper_url, render_card, render_cards


@pytest.fixture
def paper(make_paper):
    return make_paper(
        "2401.00001",
        "Sparse attention",
        "We propose a novel sparse attention method for long documents. Short.",
        authors=["Ada Lovelace"],
        categories=["cs.CL", "cs.CL", "cs.LG"],
        comment="ACL 2024",
    )


def test_unscored_card(paper):
    text = render_card(UnscoredPaper(paper=paper))

    assert text.startswith("### Sparse attention")
    assert "*Ada Lovelace*" in text
    assert "**Categories:** cs.CL, cs.LG" in text
    assert "**Comment:** ACL 2024" in text
    assert "Relevance" not in text


def test_scored_card_shows_breakdown(paper):
    scores = PaperScores(similarity=0.25, recency=1.0, foundational=0.0, relevance=0.425)
    text = render_card(ScoredPaper(paper=paper, scores=scores))

    assert "**Relevance:** 0.425 (similarity 0.250, recency 1.00, foundational 0.00)" in text


def test_key_points(paper):
    text = render_card(UnscoredPaper(paper=paper), show_key_points=True)

    assert "**Key points:**" in text
    assert "- We propose a novel sparse attention method for long documents" in text


def test_missing_authors(make_paper):
    text = render_card(UnscoredPaper(paper=make_paper(authors=[])))

    assert "*Unknown authors*" in text


def test_render_cards_joins(paper):
    cards = [UnscoredPaper(paper=paper), UnscoredPaper(paper=paper)]

    assert render_cards(cards).count("### Sparse attention") == 2


def test_rejects_plain_paper(paper):
    with pytest.raises(TypeError):
        render_card(paper)


def test_arxiv_urls():
    assert paper_url("2401.00001") == "https://arxiv.org/abs/2401.00001"
    assert pdf_url("2401.00001") == "https://arxiv.org/pdf/2401.00001.pdf"


def test_card_links_abstract_and_pdf(paper):
    text = render_card(UnscoredPaper(paper=paper))

    assert (
        "- [Abstract](https://arxiv.org/abs/2401.00001)"
        " | [PDF](https://arxiv.org/pdf/2401.00001.pdf)"
    ) in text


def test_scored_card_shows_percent_match(paper):
    scores = PaperScores(similarity=0.9, recency=1.0, foundational=0.5, relevance=0.876)
    text = render_card(ScoredPaper(paper=paper, scores=scores))

    lines = text.splitlines()
    assert lines[2] == "- **88% match**"
    assert lines[3].startswith("- **Relevance:** 0.876")


def test_unscored_card_has_no_match_line(paper):
    assert "% match" not in render_card(UnscoredPaper(paper=paper))
