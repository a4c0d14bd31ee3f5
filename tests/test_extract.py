"""Tests for the TLDExtract facade and host helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from tldsplit import TLDExtract
from tldsplit.core.utils import ascii_compatible_encode, extract_host, parse_comma_separated
from tldsplit.exceptions import InvalidSourceError


class TestExtractHost:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("example.com", "example.com"),
            ("WWW.Example.com", "www.example.com"),
            ("example.com.", "example.com"),
            ("https://user:pw@www.example.com:8080/path?q=1", "www.example.com"),
            ("//cdn.example.com/x.js", "cdn.example.com"),
            ("example.com/path", "example.com"),
            ("  example.com  ", "example.com"),
            ("example.com/login?next=https://evil.com", "example.com"),
            ("www.example.com/r?u=http://x.org", "www.example.com"),
            ("ftp://files.example.co.uk/pub", "files.example.co.uk"),
        ],
    )
    def test_hosts(self, value: str, expected: str) -> None:
        assert extract_host(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "https://", "."])
    def test_nothing_usable(self, value) -> None:
        assert extract_host(value) is None


class TestAsciiCompatibleEncode:
    def test_unicode(self) -> None:
        assert ascii_compatible_encode("公司.hk") == "xn--55qx5d.hk"

    def test_ascii_needs_nothing(self) -> None:
        assert ascii_compatible_encode("co.uk") is None

    def test_unencodable(self) -> None:
        assert ascii_compatible_encode("公司..hk") is None


def test_parse_comma_separated() -> None:
    assert parse_comma_separated("a.com, b.com,,") == ["a.com", "b.com"]
    assert parse_comma_separated("") == []


class TestTLDExtract:
    def test_parse_url(self, sample_psl: str) -> None:
        extractor = TLDExtract.from_text(sample_psl)
        parts = extractor.parse("https://forums.news.example.co.uk/thread")
        assert parts.root_domain == "example.co.uk"
        assert parts.sub_domain == "forums.news"

    def test_parse_host_with_url_in_query(self, sample_psl: str) -> None:
        extractor = TLDExtract.from_text(sample_psl)
        parts = extractor.parse("www.example.com/r?u=http://x.org")
        assert parts.root_domain == "example.com"
        assert parts.sub_domain == "www"

    def test_parse_unresolvable(self, sample_psl: str) -> None:
        extractor = TLDExtract.from_text(sample_psl)
        assert extractor.parse("localhost") is None
        assert extractor.parse("") is None
        assert extractor.parse(None) is None

    def test_from_file(self, psl_file: Path) -> None:
        extractor = TLDExtract.from_file(psl_file)
        assert extractor.parse("www.ck").root_domain == "www.ck"

    def test_from_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidSourceError):
            TLDExtract.from_file(tmp_path / "missing.dat")

    def test_empty_text(self) -> None:
        with pytest.raises(InvalidSourceError):
            TLDExtract.from_text("")

    def test_freeze_round_trip(self, sample_psl: str, tmp_path: Path) -> None:
        extractor = TLDExtract.from_text(sample_psl)
        frozen_path = tmp_path / "frozen.dat"
        frozen_path.write_text(extractor.freeze(), encoding="utf-8")

        reloaded = TLDExtract.from_file(frozen_path, frozen=True)
        assert reloaded.ruleset == extractor.ruleset
        assert reloaded.parse("a.shop.xn--55qx5d.hk") == extractor.parse("a.shop.xn--55qx5d.hk")

    def test_shared_ruleset(self, ruleset) -> None:
        first = TLDExtract(ruleset)
        second = TLDExtract(ruleset)
        assert first.ruleset is second.ruleset
        assert first.parse("example.com") == second.parse("example.com")
