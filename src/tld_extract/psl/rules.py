"""
Public Suffix List rule model.

Rules are stored as label tuples in root-first orientation: the rule
``*.kawasaki.jp`` becomes ``("jp", "kawasaki", "*")``.
"""

from dataclasses import dataclass, field
from enum import Enum

WILDCARD_LABEL = "*"
EXCEPTION_MARKER = "!"


class RuleKind(str, Enum):
    """Kind of a PSL rule."""

    NORMAL = "normal"
    WILDCARD = "wildcard"
    EXCEPTION = "exception"


@dataclass(frozen=True)
class Rule:
    """
    A single PSL rule.

    Attributes:
        labels: Rule labels, rightmost DNS label first
        kind: Rule kind
    """

    labels: tuple[str, ...]
    kind: RuleKind = RuleKind.NORMAL

    def __len__(self) -> int:
        return len(self.labels)

    def matches(self, host_labels: tuple[str, ...]) -> bool:
        """
        Check whether this rule covers the trailing labels of a host.

        Args:
            host_labels: Host labels, rightmost DNS label first

        Returns:
            True if every rule label equals the host label at the same
            position, or is the wildcard label
        """
        if len(self.labels) > len(host_labels):
            return False
        for rule_label, host_label in zip(self.labels, host_labels):
            if rule_label != WILDCARD_LABEL and rule_label != host_label:
                return False
        return True

    def suffix_length(self) -> int:
        """Number of host labels this rule claims as public suffix."""
        if self.kind is RuleKind.EXCEPTION:
            return len(self.labels) - 1
        return len(self.labels)

    def to_text(self) -> str:
        """Render the rule back in PSL source form."""
        text = ".".join(reversed(self.labels))
        if self.kind is RuleKind.EXCEPTION:
            return EXCEPTION_MARKER + text
        return text


@dataclass(frozen=True)
class RuleSet:
    """
    Immutable PSL rule set partitioned by rule kind.

    A rule set is built once (see ``tld_extract.psl.parser``) and replaced
    wholesale when the list is refreshed.
    """

    normals: frozenset[Rule] = field(default_factory=frozenset)
    wildcards: frozenset[Rule] = field(default_factory=frozenset)
    exceptions: frozenset[Rule] = field(default_factory=frozenset)

    def __len__(self) -> int:
        return len(self.normals) + len(self.wildcards) + len(self.exceptions)

    def stats(self) -> dict[str, int]:
        """Rule counts per kind."""
        return {
            "normals": len(self.normals),
            "wildcards": len(self.wildcards),
            "exceptions": len(self.exceptions),
            "total": len(self),
        }
