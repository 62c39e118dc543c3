"""
Parse result type.
"""

from dataclasses import asdict, dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class TLDResult:
    """
    Domain parts of a parsed hostname.

    Example for ``www.github.com``:
        root_domain="github.com", top_level_domain="com",
        second_level_domain="github", sub_domain="www"

    Attributes:
        root_domain: Public suffix plus the registrable label before it
        top_level_domain: Public suffix (effective TLD), may be multi-label
        second_level_domain: Registrable label before the public suffix
        sub_domain: Remaining leading labels
    """

    root_domain: Optional[str] = None
    top_level_domain: Optional[str] = None
    second_level_domain: Optional[str] = None
    sub_domain: Optional[str] = None

    @classmethod
    def from_labels(
        cls, labels: Sequence[str], suffix_length: int
    ) -> Optional["TLDResult"]:
        """
        Split host labels at the public suffix boundary.

        Args:
            labels: Host labels in reading order (left to right)
            suffix_length: Number of trailing labels forming the public suffix

        Returns:
            TLDResult, or None if the boundary does not fit the host
        """
        n = len(labels)
        if suffix_length <= 0 or n < suffix_length:
            return None

        top_level_domain = ".".join(labels[n - suffix_length:])
        if n == suffix_length:
            return cls(top_level_domain=top_level_domain)

        second_level_domain = labels[n - suffix_length - 1]
        sub_domain = None
        if n > suffix_length + 1:
            sub_domain = ".".join(labels[: n - suffix_length - 1])

        return cls(
            root_domain=f"{second_level_domain}.{top_level_domain}",
            top_level_domain=top_level_domain,
            second_level_domain=second_level_domain,
            sub_domain=sub_domain,
        )

    def to_dict(self) -> dict[str, Optional[str]]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
