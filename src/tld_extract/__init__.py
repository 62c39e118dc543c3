"""
Root domain / TLD / subdomain extraction based on the Public Suffix List.
"""

from .errors import FormatError, PSLFetchError, PSLNotFoundError, TLDExtractError
from .extractor import TLDExtract
from .normalization import SupportsHostname, hostname_of, normalize_host
from .psl import (
    MatchMode,
    PSLParser,
    Rule,
    RuleKind,
    RuleSet,
    TLDParser,
    TLDResult,
    build_rule_set,
    match,
)

__version__ = "0.1.0"

__all__ = [
    "TLDExtract",
    "TLDResult",
    "TLDParser",
    "PSLParser",
    "MatchMode",
    "Rule",
    "RuleKind",
    "RuleSet",
    "build_rule_set",
    "match",
    "normalize_host",
    "hostname_of",
    "SupportsHostname",
    "TLDExtractError",
    "FormatError",
    "PSLFetchError",
    "PSLNotFoundError",
]
