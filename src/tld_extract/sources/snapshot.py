"""
On-disk PSL snapshots.

Layout under the cache directory:
- public_suffix_list.dat.zst: zstd-compressed PSL text
- snapshot.json: source URL, fetch time and sizes
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import zstandard as zstd

logger = logging.getLogger(__name__)

SNAPSHOT_FILENAME = "public_suffix_list.dat.zst"
METADATA_FILENAME = "snapshot.json"


def read_psl_file(path: Path | str) -> bytes:
    """
    Read a PSL file, decompressing ``.zst`` files.

    Args:
        path: Path to a ``.dat`` or ``.zst`` file

    Returns:
        Raw PSL bytes

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"PSL file not found: {path}")

    data = path.read_bytes()
    if path.suffix == ".zst":
        decompressor = zstd.ZstdDecompressor()
        data = decompressor.decompress(data)

    logger.info(f"Read {len(data):,} bytes of PSL data from {path}")
    return data


class SnapshotStore:
    """
    Persist fetched PSL data as a compressed snapshot.

    Writes go to a temporary file first and are renamed into place, so a
    reader sees either the previous snapshot or the new one.
    """

    def __init__(self, cache_dir: Path | str, compression_level: int = 6):
        """
        Initialize the store.

        Args:
            cache_dir: Directory holding the snapshot
            compression_level: zstd compression level
        """
        self.cache_dir = Path(cache_dir)
        self.compression_level = compression_level
        self.snapshot_path = self.cache_dir / SNAPSHOT_FILENAME
        self.metadata_path = self.cache_dir / METADATA_FILENAME

    def exists(self) -> bool:
        """Check whether a snapshot has been saved."""
        return self.snapshot_path.exists()

    def save(self, data: bytes, source_url: Optional[str] = None) -> Path:
        """
        Save PSL bytes as the current snapshot (atomic write).

        Args:
            data: Raw PSL bytes
            source_url: Where the data came from, recorded in the metadata

        Returns:
            Path of the snapshot file
        """
        self.cache_dir.mkdir(parents=True, exist_ok=True)

        compressor = zstd.ZstdCompressor(level=self.compression_level)
        compressed = compressor.compress(data)

        temp_path = self.snapshot_path.with_suffix(".tmp")
        temp_path.write_bytes(compressed)
        temp_path.rename(self.snapshot_path)

        metadata = {
            "source_url": source_url,
            "fetched_at": datetime.now(timezone.utc).isoformat(),
            "size_bytes": len(data),
            "compressed_bytes": len(compressed),
        }
        temp_meta = self.metadata_path.with_suffix(".tmp")
        with open(temp_meta, "w") as f:
            json.dump(metadata, f, indent=2)
        temp_meta.rename(self.metadata_path)

        ratio = len(data) / len(compressed) if compressed else 0
        logger.info(
            f"Saved PSL snapshot to {self.snapshot_path} "
            f"({len(data):,} → {len(compressed):,} bytes, {ratio:.1f}x)"
        )
        return self.snapshot_path

    def load(self) -> Optional[bytes]:
        """
        Load the snapshot.

        Returns:
            Raw PSL bytes, or None if no snapshot exists
        """
        if not self.exists():
            logger.info(f"No PSL snapshot at {self.snapshot_path}")
            return None
        return read_psl_file(self.snapshot_path)

    def metadata(self) -> Optional[dict]:
        """Snapshot metadata, or None if it has not been written."""
        if not self.metadata_path.exists():
            return None
        with open(self.metadata_path) as f:
            return json.load(f)
