"""Unit tests for public suffix matching."""

import pytest

from tld_extract import MatchMode, TLDParser, TLDResult, build_rule_set, match


@pytest.fixture
def parser(rule_set):
    """Create a TLDParser over the sample PSL."""
    return TLDParser(rule_set)


def parse(parser, host):
    """Exceptions and wildcards first, normal rules as fallback."""
    return parser.parse_exceptions_and_wildcards(host) or parser.parse_normals(host)


class TestNormalRules:
    """Test matching with normal rules."""

    def test_single_label_suffix(self, parser):
        """Test a host under 'com'."""
        result = parser.parse_normals("www.github.com")
        assert result == TLDResult(
            root_domain="github.com",
            top_level_domain="com",
            second_level_domain="github",
            sub_domain="www",
        )

    def test_longest_match_wins(self, parser):
        """Test 'co.uk' is preferred over 'uk'."""
        result = parser.parse_normals("example.co.uk")
        assert result.top_level_domain == "co.uk"
        assert result.root_domain == "example.co.uk"
        assert result.second_level_domain == "example"
        assert result.sub_domain is None

    def test_host_is_public_suffix(self, parser):
        """Test a host equal to its public suffix only has a TLD."""
        assert parser.parse_normals("com") == TLDResult(top_level_domain="com")
        assert parser.parse_normals("co.jp") == TLDResult(top_level_domain="co.jp")

    def test_unicode_labels(self, parser):
        """Test multi-label Unicode subdomains."""
        result = parser.parse_normals("www.ラーメン.寿司.co.jp")
        assert result.top_level_domain == "co.jp"
        assert result.second_level_domain == "寿司"
        assert result.root_domain == "寿司.co.jp"
        assert result.sub_domain == "www.ラーメン"

    def test_unicode_tld(self, parser):
        """Test a Unicode TLD rule."""
        result = parser.parse_normals("example.みんな")
        assert result.top_level_domain == "みんな"
        assert result.root_domain == "example.みんな"

    def test_private_domain_rule(self, parser):
        """Test multi-label private suffixes like github.io."""
        result = parser.parse_normals("gumob.github.io")
        assert result.top_level_domain == "github.io"
        assert result.root_domain == "gumob.github.io"

    def test_case_insensitive(self, parser):
        """Test matching ignores case."""
        result = parser.parse_normals("WWW.Example.CO.UK")
        assert result.root_domain == "example.co.uk"
        assert result.sub_domain == "www"

    def test_no_match(self, parser):
        """Test unknown single-label hosts yield None."""
        assert parser.parse_normals("localhost") is None
        assert parser.parse_normals("example.invalid") is None

    def test_empty_host(self, parser):
        """Test empty input yields None."""
        assert parser.parse_normals("") is None

    def test_normals_ignore_wildcards(self, parser):
        """Test wildcard-only suffixes are not matched by normal rules."""
        assert parser.parse_normals("foo.ck") is None


class TestExceptionsAndWildcards:
    """Test matching with exception and wildcard rules."""

    def test_wildcard_claims_extra_label(self, parser):
        """Test '*.ck' makes 'foo.ck' a public suffix."""
        assert parser.parse_exceptions_and_wildcards("foo.ck") == TLDResult(
            top_level_domain="foo.ck"
        )

        result = parser.parse_exceptions_and_wildcards("shop.example.foo.ck")
        assert result.top_level_domain == "foo.ck"
        assert result.second_level_domain == "example"
        assert result.root_domain == "example.foo.ck"
        assert result.sub_domain == "shop"

    def test_exception_overrides_wildcard(self, parser):
        """Test '!www.ck' shortens the suffix to 'ck'."""
        result = parser.parse_exceptions_and_wildcards("www.ck")
        assert result.top_level_domain == "ck"
        assert result.second_level_domain == "www"
        assert result.root_domain == "www.ck"
        assert result.sub_domain is None

    def test_exception_beats_longer_wildcard(self):
        """Test an exception prevails over a wildcard with more labels."""
        parser = TLDParser(build_rule_set(b"*.ck\n!www.ck\n*.www.ck\n"))

        result = parser.parse_exceptions_and_wildcards("a.www.ck")

        assert result == TLDResult(
            root_domain="www.ck",
            top_level_domain="ck",
            second_level_domain="www",
            sub_domain="a",
        )

    def test_exception_with_subdomain(self, parser):
        """Test exception rules on longer hosts."""
        result = parser.parse_exceptions_and_wildcards("www.city.kawasaki.jp")
        assert result == TLDResult(
            root_domain="city.kawasaki.jp",
            top_level_domain="kawasaki.jp",
            second_level_domain="city",
            sub_domain="www",
        )

    def test_three_label_wildcard(self, parser):
        """Test wildcard rules with several fixed labels."""
        result = parser.parse_exceptions_and_wildcards(
            "host.ec2-1-2-3-4.us-east-1.compute.amazonaws.com"
        )
        assert result.top_level_domain == "us-east-1.compute.amazonaws.com"
        assert result.root_domain == "ec2-1-2-3-4.us-east-1.compute.amazonaws.com"
        assert result.sub_domain == "host"

    def test_wildcard_needs_enough_labels(self, parser):
        """Test '*.ck' does not match the bare 'ck'."""
        assert parser.parse_exceptions_and_wildcards("ck") is None

    def test_no_match_for_normal_hosts(self, parser):
        """Test hosts only covered by normal rules yield None."""
        assert parser.parse_exceptions_and_wildcards("www.example.com") is None


class TestCombinedParse:
    """Test the exceptions/wildcards-then-normals order."""

    def test_wildcard_beats_shorter_normal(self, parser):
        """Test '*.kawasaki.jp' takes precedence over 'jp'."""
        result = parse(parser, "foo.bar.kawasaki.jp")
        assert result.top_level_domain == "bar.kawasaki.jp"
        assert result.root_domain == "foo.bar.kawasaki.jp"

    def test_falls_back_to_normals(self, parser):
        """Test hosts without exception/wildcard match use normal rules."""
        result = parse(parser, "mail.example.co.uk")
        assert result.root_domain == "example.co.uk"

    def test_bare_wildcard_parent_is_unmatched(self, parser):
        """Test a suffix only covered by a wildcard parent does not match."""
        assert parse(parser, "ck") is None


class TestMatchFunction:
    """Test the match() entry point."""

    def test_modes(self, rule_set):
        """Test mode selects the rule subset."""
        assert match(rule_set, "foo.ck", MatchMode.EXCEPTIONS_AND_WILDCARDS) == (
            TLDResult(top_level_domain="foo.ck")
        )
        assert match(rule_set, "foo.ck", MatchMode.NORMALS_ONLY) is None
        assert match(rule_set, "a.com", MatchMode.NORMALS_ONLY).root_domain == "a.com"

    def test_single_com_rule(self):
        """Test any host covered only by 'com' gets TLD 'com'."""
        rule_set = build_rule_set(b"com\n")
        for host in ["com", "a.com", "b.a.com", "x.y.z.com"]:
            result = match(rule_set, host, MatchMode.NORMALS_ONLY)
            assert result.top_level_domain == "com"

    def test_minimal_ck_rules(self):
        """Test exception/wildcard pair in isolation."""
        rule_set = build_rule_set(b"*.ck\n!www.ck\n")
        mode = MatchMode.EXCEPTIONS_AND_WILDCARDS
        assert match(rule_set, "www.ck", mode).top_level_domain == "ck"
        assert match(rule_set, "foo.ck", mode).top_level_domain == "foo.ck"

    def test_rebuilt_rule_sets_agree(self, psl_bytes):
        """Test results from two builds of the same data are equal."""
        first = build_rule_set(psl_bytes)
        second = build_rule_set(psl_bytes)
        for host in ["www.ck", "a.b.kawasaki.jp", "x.co.uk", "com", "nothing"]:
            for mode in MatchMode:
                assert match(first, host, mode) == match(second, host, mode)


class TestTLDResult:
    """Test TLDResult construction."""

    def test_from_labels(self):
        """Test splitting labels at the suffix boundary."""
        result = TLDResult.from_labels(["a", "b", "example", "co", "uk"], 2)
        assert result == TLDResult(
            root_domain="example.co.uk",
            top_level_domain="co.uk",
            second_level_domain="example",
            sub_domain="a.b",
        )

    def test_from_labels_out_of_range(self):
        """Test impossible boundaries yield None."""
        assert TLDResult.from_labels(["com"], 2) is None
        assert TLDResult.from_labels(["example", "com"], 0) is None

    def test_to_dict(self):
        """Test dictionary conversion keeps absent fields."""
        assert TLDResult(top_level_domain="com").to_dict() == {
            "root_domain": None,
            "top_level_domain": "com",
            "second_level_domain": None,
            "sub_domain": None,
        }
