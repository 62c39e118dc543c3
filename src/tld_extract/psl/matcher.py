"""
Public suffix matching.

Implements the PSL algorithm (https://publicsuffix.org/list/) over a
``RuleSet``:

- A rule matches when each of its labels equals the host label at the same
  position counted from the right, or is ``*``.
- A matching exception rule prevails; otherwise the rule with the most
  labels wins.
- An exception rule claims one label less than it has; wildcard and normal
  rules claim all of their labels.
"""

import unicodedata
from collections import defaultdict
from enum import Enum
from typing import Iterable, Optional

from .result import TLDResult
from .rules import Rule, RuleSet


class MatchMode(str, Enum):
    """Which rule subset a match runs against."""

    EXCEPTIONS_AND_WILDCARDS = "exceptions_and_wildcards"
    NORMALS_ONLY = "normals_only"


def _index_by_length(rules: Iterable[Rule]) -> dict[int, list[Rule]]:
    """Group rules by label count."""
    index: dict[int, list[Rule]] = defaultdict(list)
    for rule in rules:
        index[len(rule)].append(rule)
    return dict(index)


def _longest_match(
    index: dict[int, list[Rule]], lengths: list[int], host_labels: tuple[str, ...]
) -> Optional[Rule]:
    """Find the longest rule in ``index`` covering ``host_labels``."""
    for length in lengths:
        if length > len(host_labels):
            continue
        for rule in index[length]:
            if rule.matches(host_labels):
                return rule
    return None


class TLDParser:
    """
    Match hostnames against one immutable rule set.

    Rules are indexed by label count when the parser is created, so a lookup
    only probes the lengths a host can match, longest first. Instances hold
    no mutable state and are safe to share between threads.

    Usage:
        parser = TLDParser(rule_set)
        result = parser.parse_normals("www.example.co.uk")
        print(result.root_domain)  # example.co.uk
    """

    def __init__(self, rule_set: RuleSet):
        """
        Initialize the parser.

        Args:
            rule_set: Rule set built by ``PSLParser``
        """
        self.rule_set = rule_set

        self._normals = frozenset(rule.labels for rule in rule_set.normals)
        self._normal_lengths = sorted(
            {len(rule) for rule in rule_set.normals}, reverse=True
        )

        self._wildcards = _index_by_length(rule_set.wildcards)
        self._wildcard_lengths = sorted(self._wildcards, reverse=True)

        self._exceptions = _index_by_length(rule_set.exceptions)
        self._exception_lengths = sorted(self._exceptions, reverse=True)

    def parse_normals(self, host: str) -> Optional[TLDResult]:
        """
        Parse a hostname using only normal rules.

        Args:
            host: Normalized hostname

        Returns:
            TLDResult, or None if no normal rule matches
        """
        labels = self._split(host)
        if labels is None:
            return None

        host_labels = tuple(reversed(labels))
        for length in self._normal_lengths:
            if length > len(host_labels):
                continue
            if host_labels[:length] in self._normals:
                return TLDResult.from_labels(labels, length)
        return None

    def parse_exceptions_and_wildcards(self, host: str) -> Optional[TLDResult]:
        """
        Parse a hostname using only exception and wildcard rules.

        Args:
            host: Normalized hostname

        Returns:
            TLDResult, or None if neither an exception nor a wildcard rule
            matches
        """
        labels = self._split(host)
        if labels is None:
            return None

        host_labels = tuple(reversed(labels))
        # A matching exception prevails even over a longer matching wildcard
        rule = _longest_match(
            self._exceptions, self._exception_lengths, host_labels
        ) or _longest_match(self._wildcards, self._wildcard_lengths, host_labels)
        if rule is None:
            return None

        return TLDResult.from_labels(labels, rule.suffix_length())

    def parse(self, host: str, mode: MatchMode) -> Optional[TLDResult]:
        """Parse a hostname against the rule subset selected by ``mode``."""
        if mode is MatchMode.NORMALS_ONLY:
            return self.parse_normals(host)
        return self.parse_exceptions_and_wildcards(host)

    @staticmethod
    def _split(host: str) -> Optional[list[str]]:
        """Split a hostname into lowercase labels (reading order)."""
        if not host:
            return None
        host = unicodedata.normalize("NFC", host.lower())
        return host.split(".")


def match(rule_set: RuleSet, host: str, mode: MatchMode) -> Optional[TLDResult]:
    """
    Match a normalized hostname against a rule set.

    Builds a throwaway ``TLDParser``; hold on to a parser (or a
    ``TLDExtract``) when matching many hosts.
    """
    return TLDParser(rule_set).parse(host, mode)
