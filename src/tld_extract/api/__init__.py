"""
API serving layer.

Handles hostname parsing and PSL refresh requests.
"""

from tld_extract.api.loader import get_extractor, init_extractor, reset_extractor
from tld_extract.api.models import RefreshResponse, RuleSetStats, TLDResponse
from tld_extract.api.server import app

__all__ = [
    "get_extractor",
    "init_extractor",
    "reset_extractor",
    "TLDResponse",
    "RuleSetStats",
    "RefreshResponse",
    "app",
]
