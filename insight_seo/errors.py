class InsightSEOError(Exception):
    """Base class for errors raised by the analysis service."""


class InvalidPayloadError(InsightSEOError, ValueError):
    """Request body is not an object or a field has the wrong type."""


class EmptyInputError(InsightSEOError, ValueError):
    """Text is blank after trimming."""


class InvalidKeywordError(InsightSEOError, ValueError):
    """Keyword to insert is blank."""


class GrammarServiceUnavailableError(InsightSEOError):
    """The upstream grammar service failed or returned an unusable response."""
