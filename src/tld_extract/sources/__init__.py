"""
PSL data sources: local files, cached snapshots and remote fetches.

Everything here only produces raw PSL bytes; building rule sets is left to
``tld_extract.psl``.
"""

from .bundled import read_bundled_psl
from .remote import fetch_psl
from .snapshot import SnapshotStore, read_psl_file

__all__ = ["fetch_psl", "read_bundled_psl", "SnapshotStore", "read_psl_file"]
