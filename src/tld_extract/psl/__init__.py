"""
Public Suffix List rule model, parser and matcher.
"""

from .matcher import MatchMode, TLDParser, match
from .parser import PSLParser, build_rule_set
from .result import TLDResult
from .rules import Rule, RuleKind, RuleSet

__all__ = [
    "MatchMode",
    "TLDParser",
    "match",
    "PSLParser",
    "build_rule_set",
    "TLDResult",
    "Rule",
    "RuleKind",
    "RuleSet",
]
