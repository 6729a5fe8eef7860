from abc import ABC, abstractmethod
from typing import List, Sequence

from papertime.models.paper import Paper


class PaperSource(ABC):
    """Abstract base class for paper pool providers

    The ranking core does not care how papers were retrieved, paginated or
    retried; a source only has to hand over the current pool.
    """

    @abstractmethod
    def fetch_papers(self) -> List[Paper]:
        """Return the current paper pool

        Raises:
            PaperSourceError: If the pool cannot be produced
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Source name for logging and identification"""
        pass


class StaticPaperSource(PaperSource):
    """Serves a fixed in-memory pool"""

    def __init__(self, papers: Sequence[Paper]):
        self._papers = list(papers)

    def fetch_papers(self) -> List[Paper]:
        return list(self._papers)

    @property
    def name(self) -> str:
        return "static"
