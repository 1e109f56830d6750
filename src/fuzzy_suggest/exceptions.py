"""Exception hierarchy for fuzzy_suggest.

Every error raised on purpose by the package derives from ``SuggestError``
so callers can catch expected failures without hiding programming mistakes.
"""

from __future__ import annotations


class SuggestError(Exception):
    """Base exception for all fuzzy_suggest errors."""


class ConfigurationError(SuggestError, ValueError):
    """Invalid engine settings: negative limits, unknown metric, bad config file."""


class RepresentationError(SuggestError):
    """The representation function failed for one candidate item."""


class CandidateSourceError(SuggestError):
    """A candidate list could not be read."""
