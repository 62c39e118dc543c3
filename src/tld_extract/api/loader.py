"""
Global extractor instance for the API.
"""

import logging
from typing import Optional

from tld_extract.config import Config
from tld_extract.extractor import TLDExtract

logger = logging.getLogger(__name__)

# Global singleton instance
_extractor: Optional[TLDExtract] = None


def get_extractor() -> TLDExtract:
    """
    Get the global TLDExtract instance.

    Raises:
        RuntimeError: If the extractor is not initialized
    """
    if _extractor is None:
        raise RuntimeError("Extractor not initialized. Call init_extractor() first.")
    return _extractor


def init_extractor(
    extractor: Optional[TLDExtract] = None, config: Optional[Config] = None
) -> TLDExtract:
    """
    Initialize the global TLDExtract instance.

    Args:
        extractor: Ready-made extractor; built from config when omitted
        config: Configuration used when building from config

    Returns:
        The installed extractor
    """
    global _extractor
    if extractor is None:
        extractor = TLDExtract.from_config(config)
    _extractor = extractor
    logger.info(f"Extractor initialized with {len(extractor.rule_set)} rules")
    return _extractor


def reset_extractor() -> None:
    """Drop the global extractor (mainly for testing)."""
    global _extractor
    _extractor = None


def is_initialized() -> bool:
    """Check whether an extractor is installed."""
    return _extractor is not None
