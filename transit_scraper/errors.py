"""Error types raised by the fetch / parse / extract pipeline. No retries: every error is terminal."""


class ScraperError(Exception):
    """Base class for scraper failures."""


class FetchError(ScraperError, RuntimeError):
    """HTTP request to a Maps RPC endpoint failed."""


class ParseError(ScraperError, ValueError):
    """Response body is not valid JSON after stripping the XSSI prefix."""


class StructureNotFoundError(ScraperError, LookupError):
    """No node in the response matched the expected structural pattern."""
