"""Exception hierarchy for PaperTime.

The ranking and filtering core does not raise for expected steady-state
conditions (unknown terms, missing vectors, empty pools). These exceptions
cover misuse and the collaborators around the core:
- index mutation after build
- malformed input detected outside pydantic validation
- paper source failures
- configuration errors

All exceptions inherit from PaperTimeError so callers can catch them in one
except block.
"""


class PaperTimeError(Exception):
    """Base exception for all PaperTime errors"""

    pass


class IndexStateError(PaperTimeError):
    """Operation not allowed in the index's current state

    Raised when:
    - A document is added to a corpus builder that has already been built
    """

    pass


class InvalidInputError(PaperTimeError):
    """Input could not be interpreted

    Raised when:
    - CLI subject or paper type labels are not recognised
    """

    pass


class PaperSourceError(PaperTimeError):
    """Paper source failed to deliver a pool

    Raised when:
    - The papers file is missing or unreadable
    - The file is not valid JSON
    - A record fails Paper validation
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class ConfigValidationError(PaperTimeError):
    """Configuration file could not be read or validated"""

    pass
