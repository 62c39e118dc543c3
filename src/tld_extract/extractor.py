"""
Engine facade: holds the active rule set and parses inputs against it.
"""

import logging
import threading
from pathlib import Path
from typing import Optional

import requests

from .config import Config, get_config
from .errors import PSLFetchError, PSLNotFoundError
from .normalization import Parseable, hostname_of
from .psl import PSLParser, RuleSet, TLDParser, TLDResult
from .sources import SnapshotStore, fetch_psl, read_bundled_psl, read_psl_file

logger = logging.getLogger(__name__)


class TLDExtract:
    """
    Extract root domain, TLD, second-level domain and subdomain.

    The active rule set is replaced wholesale by ``refresh`` or
    ``fetch_latest_psl``. A parse call reads the current parser once, so it
    sees either the old or the new rule set, never a mix.

    Usage:
        extractor = TLDExtract.from_file("public_suffix_list.dat")
        result = extractor.parse("https://www.github.com/gumob/TLDExtract")
        print(result.root_domain)        # github.com
        print(result.top_level_domain)   # com
        print(result.second_level_domain)  # github
        print(result.sub_domain)         # www
    """

    def __init__(self, rule_set: RuleSet, source_url: Optional[str] = None):
        """
        Initialize the extractor.

        Args:
            rule_set: Rule set to match against
            source_url: URL used by ``fetch_latest_psl`` when none is given
        """
        self._parser = TLDParser(rule_set)
        self._swap_lock = threading.Lock()
        self.source_url = source_url or get_config().psl.source_url

    @classmethod
    def from_bytes(cls, data: bytes, **kwargs) -> "TLDExtract":
        """
        Create an extractor from raw PSL bytes.

        Raises:
            FormatError: If the data cannot be decoded
        """
        return cls(PSLParser().parse(data), **kwargs)

    @classmethod
    def from_file(cls, path: Path | str, **kwargs) -> "TLDExtract":
        """Create an extractor from a ``.dat`` or ``.dat.zst`` PSL file."""
        return cls.from_bytes(read_psl_file(path), **kwargs)

    @classmethod
    def bundled(cls, **kwargs) -> "TLDExtract":
        """
        Create an extractor from the PSL snapshot shipped with the package.

        Raises:
            PSLNotFoundError: If the package was installed without its data
        """
        try:
            data = read_bundled_psl()
        except FileNotFoundError as e:
            raise PSLNotFoundError(str(e)) from e
        return cls.from_bytes(data, **kwargs)

    @classmethod
    def from_config(
        cls,
        config: Optional[Config] = None,
        session: Optional[requests.Session] = None,
    ) -> "TLDExtract":
        """
        Create an extractor from the configured PSL source.

        Resolution order: ``psl.local_path``, then the cached snapshot, then
        a fresh fetch (saved to the cache) when ``psl.allow_fetch`` is set,
        then the bundled list when ``psl.allow_bundled`` is set. A failed
        fetch falls through to the bundled list.

        Raises:
            PSLNotFoundError: If no source is available
            PSLFetchError: If fetching failed and the bundled list is disabled
        """
        config = config or get_config()
        psl = config.psl

        if psl.local_path is not None:
            logger.info(f"Loading PSL from local file {psl.local_path}")
            return cls.from_file(psl.local_path, source_url=psl.source_url)

        store = SnapshotStore(psl.cache_dir, compression_level=psl.compression_level)
        data = store.load()
        if data is not None:
            logger.info(f"Loading PSL from snapshot {store.snapshot_path}")
            return cls.from_bytes(data, source_url=psl.source_url)

        if psl.allow_fetch:
            try:
                data = fetch_psl(
                    psl.source_url, timeout=psl.fetch_timeout, session=session
                )
            except PSLFetchError as e:
                if not psl.allow_bundled:
                    raise
                logger.warning(f"PSL fetch failed, using bundled list: {e}")
            else:
                extractor = cls.from_bytes(data, source_url=psl.source_url)
                store.save(data, source_url=psl.source_url)
                return extractor

        if not psl.allow_bundled:
            raise PSLNotFoundError(
                f"No local PSL file configured, no snapshot in {psl.cache_dir}, "
                "fetching and the bundled list are disabled"
            )

        logger.info("Loading bundled PSL")
        return cls.bundled(source_url=psl.source_url)

    @property
    def rule_set(self) -> RuleSet:
        """The active rule set."""
        return self._parser.rule_set

    def parse(self, value: Parseable, quick: bool = False) -> Optional[TLDResult]:
        """
        Parse a URL or hostname.

        Exception and wildcard rules are tried first since they are always
        more specific than a normal rule for the same host; normal rules are
        the fallback.

        Args:
            value: URL string, hostname, URL value or ``SupportsHostname``
            quick: If True, only apply normal rules

        Returns:
            TLDResult, or None if no host could be extracted or no rule matches
        """
        host = hostname_of(value)
        if host is None:
            return None

        parser = self._parser
        if quick:
            return parser.parse_normals(host)
        return parser.parse_exceptions_and_wildcards(host) or parser.parse_normals(
            host
        )

    def refresh(self, data: bytes) -> RuleSet:
        """
        Rebuild the rule set from PSL bytes and make it active.

        The new rule set is fully built before it replaces the old one; if
        parsing fails the old rule set stays active.

        Raises:
            FormatError: If the data cannot be decoded
        """
        new_parser = TLDParser(PSLParser().parse(data))
        with self._swap_lock:
            old_count = len(self._parser.rule_set)
            self._parser = new_parser
        logger.info(f"Rule set refreshed: {old_count} → {len(new_parser.rule_set)} rules")
        return new_parser.rule_set

    def fetch_latest_psl(
        self,
        url: Optional[str] = None,
        store: Optional[SnapshotStore] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> RuleSet:
        """
        Fetch the latest PSL, rebuild and activate it.

        Args:
            url: PSL URL (defaults to ``source_url``)
            store: If given, the fetched data is saved as a snapshot after a
                successful rebuild
            timeout: Request timeout in seconds (defaults to config)
            session: Optional requests session

        Returns:
            The new active rule set

        Raises:
            PSLFetchError: If the download fails
            FormatError: If the downloaded data cannot be decoded
        """
        url = url or self.source_url
        if timeout is None:
            timeout = get_config().psl.fetch_timeout

        data = fetch_psl(url, timeout=timeout, session=session)
        rule_set = self.refresh(data)
        if store is not None:
            store.save(data, source_url=url)
        return rule_set
