"""
Public Suffix List parser.

Turns raw PSL text into a ``RuleSet``. Parsing is lenient: comment lines,
blank lines and anything that does not decompose into dot-separated labels
are skipped. Only undecodable input is an error.
"""

import logging
import unicodedata

from ..errors import FormatError
from .rules import EXCEPTION_MARKER, WILDCARD_LABEL, Rule, RuleKind, RuleSet

logger = logging.getLogger(__name__)

COMMENT_MARKER = "//"


class PSLParser:
    """
    Build rule sets from Public Suffix List data.

    Usage:
        rule_set = PSLParser().parse(Path("public_suffix_list.dat").read_bytes())
    """

    # Tolerates a leading byte order mark
    encoding = "utf-8-sig"

    def parse(self, data: bytes) -> RuleSet:
        """
        Parse PSL bytes into a rule set.

        Args:
            data: Raw PSL file contents

        Returns:
            RuleSet with normal, wildcard and exception rules

        Raises:
            FormatError: If the data is not valid UTF-8
        """
        try:
            text = data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise FormatError(f"PSL data is not valid {self.encoding}: {e}") from e

        return self.parse_text(text)

    def parse_text(self, text: str) -> RuleSet:
        """Parse already-decoded PSL text into a rule set."""
        normals: set[Rule] = set()
        wildcards: set[Rule] = set()
        exceptions: set[Rule] = set()
        skipped = 0

        for line_no, raw_line in enumerate(text.splitlines(), 1):
            line = raw_line.strip()
            if not line or line.startswith(COMMENT_MARKER):
                continue

            rule = self.parse_rule(line)
            if rule is None:
                logger.debug(f"Skipping unrecognised PSL line {line_no}: {raw_line!r}")
                skipped += 1
                continue

            if rule.kind is RuleKind.EXCEPTION:
                exceptions.add(rule)
            elif rule.kind is RuleKind.WILDCARD:
                wildcards.add(rule)
            else:
                normals.add(rule)

        rule_set = RuleSet(
            normals=frozenset(normals),
            wildcards=frozenset(wildcards),
            exceptions=frozenset(exceptions),
        )
        logger.info(
            f"Parsed PSL: {len(normals)} normal, {len(wildcards)} wildcard, "
            f"{len(exceptions)} exception rules ({skipped} lines skipped)"
        )
        return rule_set

    def parse_rule(self, line: str) -> Rule | None:
        """
        Parse a single non-comment PSL line.

        Only the first whitespace-delimited token is the rule; the rest of
        the line is ignored.

        Args:
            line: Stripped, non-empty PSL line

        Returns:
            Rule, or None if the line is not a dot-separated label sequence
        """
        token = line.split(None, 1)[0]
        token = unicodedata.normalize("NFC", token.lower())

        kind = RuleKind.NORMAL
        if token.startswith(EXCEPTION_MARKER):
            kind = RuleKind.EXCEPTION
            token = token[len(EXCEPTION_MARKER):]

        labels = token.split(".")
        if not all(labels):
            return None
        if any(EXCEPTION_MARKER in label for label in labels):
            return None

        if kind is RuleKind.NORMAL and WILDCARD_LABEL in labels:
            kind = RuleKind.WILDCARD

        return Rule(labels=tuple(reversed(labels)), kind=kind)


def build_rule_set(data: bytes) -> RuleSet:
    """
    Build a rule set from raw PSL bytes.

    Raises:
        FormatError: If the data cannot be decoded
    """
    return PSLParser().parse(data)
