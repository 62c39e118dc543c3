"""
Public Suffix List snapshot shipped with the package.

Used when no local file, cached snapshot or network access is available.
"""

import logging
from importlib import resources

import zstandard as zstd

logger = logging.getLogger(__name__)

BUNDLED_PSL = "public_suffix_list.dat.zst"


def read_bundled_psl() -> bytes:
    """
    Read the bundled PSL snapshot.

    Returns:
        Raw PSL bytes

    Raises:
        FileNotFoundError: If the package was installed without its data
    """
    resource = resources.files("tld_extract") / "data" / BUNDLED_PSL
    if not resource.is_file():
        raise FileNotFoundError(f"Bundled PSL not found: {resource}")

    decompressor = zstd.ZstdDecompressor()
    data = decompressor.decompress(resource.read_bytes())

    logger.info(f"Read {len(data):,} bytes of bundled PSL data")
    return data
