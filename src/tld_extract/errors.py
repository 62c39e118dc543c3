"""Exception types raised by tld_extract."""


class TLDExtractError(Exception):
    """Base class for all tld_extract errors."""


class FormatError(TLDExtractError):
    """Raised when PSL bytes cannot be decoded as text."""


class PSLFetchError(TLDExtractError):
    """Raised when the Public Suffix List cannot be downloaded."""


class PSLNotFoundError(TLDExtractError):
    """Raised when no Public Suffix List source is available."""
