"""PaperTime: arXiv paper recommendation and filtering engine."""

__version__ = "0.1.0"
