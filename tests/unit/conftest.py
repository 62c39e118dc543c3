"""Shared fixtures: a small Public Suffix List in the real file's format."""

import pytest
import requests

from tld_extract import TLDExtract, build_rule_set
from tld_extract.config import reset_config

SAMPLE_PSL = """\
// This Source Code Form is subject to the terms of the Mozilla Public
// License, v. 2.0. If a copy of the MPL was not distributed with this
// file, You can obtain one at https://mozilla.org/MPL/2.0/.

// ===BEGIN ICANN DOMAINS===

// com : https://en.wikipedia.org/wiki/.com
com

// io : https://en.wikipedia.org/wiki/.io
io

// uk : https://en.wikipedia.org/wiki/.uk
uk
ac.uk
co.uk

// jp : https://en.wikipedia.org/wiki/.jp
jp
co.jp
*.kawasaki.jp
!city.kawasaki.jp

// ck : https://en.wikipedia.org/wiki/.ck
*.ck
!www.ck

// みんな : Charleston Road Registry Inc.
みんな

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

// GitHub, Inc.
github.io

// Amazon Elastic Compute Cloud
*.compute.amazonaws.com

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture(autouse=True)
def clean_config():
    """Isolate tests from a previously built global config."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def psl_bytes() -> bytes:
    """Sample PSL as raw bytes."""
    return SAMPLE_PSL.encode("utf-8")


@pytest.fixture
def rule_set(psl_bytes):
    """Rule set built from the sample PSL."""
    return build_rule_set(psl_bytes)


@pytest.fixture
def extractor(psl_bytes) -> TLDExtract:
    """Extractor over the sample PSL."""
    return TLDExtract.from_bytes(psl_bytes, source_url="https://psl.test/list.dat")


@pytest.fixture
def psl_file(tmp_path, psl_bytes):
    """Sample PSL written to a .dat file."""
    path = tmp_path / "public_suffix_list.dat"
    path.write_bytes(psl_bytes)
    return path


class StubResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class StubSession:
    """Records requests and replays a canned response or error."""

    def __init__(self, response: StubResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[tuple[str, float]] = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        pass


@pytest.fixture
def make_session():
    """Factory for stub sessions: ``make_session(content, status_code, error)``."""

    def _make(content: bytes = b"", status_code: int = 200, error: Exception | None = None):
        return StubSession(StubResponse(content, status_code), error=error)

    return _make


@pytest.fixture
def stub_session(make_session, psl_bytes) -> StubSession:
    """Session that serves the sample PSL."""
    return make_session(psl_bytes)
