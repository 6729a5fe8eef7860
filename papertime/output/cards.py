from typing import List, Sequence

from papertime.models.paper import Paper, PaperCard, ScoredPaper, UnscoredPaper
from papertime.services.summarization import extract_key_points

MAX_AUTHORS_SHOWN = 3
ARXIV_ABS_URL = "https://arxiv.org/abs/{paper_id}"
ARXIV_PDF_URL = "https://arxiv.org/pdf/{paper_id}.pdf"


def paper_url(paper_id: str) -> str:
    """arXiv abstract page for a paper id."""
    return ARXIV_ABS_URL.format(paper_id=paper_id)


def pdf_url(paper_id: str) -> str:
    return ARXIV_PDF_URL.format(paper_id=paper_id)


def _format_authors(authors: Sequence[str]) -> str:
    if not authors:
        return "Unknown authors"
    shown = ", ".join(authors[:MAX_AUTHORS_SHOWN])
    if len(authors) > MAX_AUTHORS_SHOWN:
        shown += f" et al. (+{len(authors) - MAX_AUTHORS_SHOWN})"
    return shown


def _paper_lines(paper: Paper, show_key_points: bool) -> List[str]:
    lines = [f"### {paper.title.strip() or paper.paper_id}"]
    lines.append(f"*{_format_authors(paper.authors)}*")
    lines.append(
        f"- **arXiv:** {paper.paper_id}  **Published:** {paper.published.strftime('%Y-%m-%d')}"
    )
    if paper.categories:
        lines.append(f"- **Categories:** {', '.join(dict.fromkeys(paper.categories))}")
    if paper.comment:
        lines.append(f"- **Comment:** {paper.comment.strip()}")
    lines.append(
        f"- [Abstract]({paper_url(paper.paper_id)}) | [PDF]({pdf_url(paper.paper_id)})"
    )

    if show_key_points:
        points = extract_key_points(paper.summary)
        if points:
            lines.append("")
            lines.append("**Key points:**")
            lines.extend(f"- {point}" for point in points)
    return lines


def render_card(card: PaperCard, show_key_points: bool = False) -> str:
    """Render a paper card as markdown."""
    if isinstance(card, ScoredPaper):
        lines = _paper_lines(card.paper, show_key_points)
        s = card.scores
        lines[2:2] = [
            f"- **{s.relevance * 100:.0f}% match**",
            f"- **Relevance:** {s.relevance:.3f} "
            f"(similarity {s.similarity:.3f}, recency {s.recency:.2f}, "
            f"foundational {s.foundational:.2f})",
        ]
    elif isinstance(card, UnscoredPaper):
        lines = _paper_lines(card.paper, show_key_points)
    else:
        raise TypeError(f"Unsupported card type: {type(card).__name__}")
    return "\n".join(lines)


def render_cards(cards: Sequence[PaperCard], show_key_points: bool = False) -> str:
    """Render cards separated by blank lines."""
    return "\n\n".join(render_card(card, show_key_points) for card in cards)
