"""
Hostname normalization utilities.

Extracts and canonicalizes the host token fed to the suffix matcher.
"""

from .hostname import Parseable, SupportsHostname, hostname_of, normalize_host

__all__ = [
    "normalize_host",
    "hostname_of",
    "SupportsHostname",
    "Parseable",
]
