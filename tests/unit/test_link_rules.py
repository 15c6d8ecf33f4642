"""
Tests for link normalization and classification helpers.
"""

import pytest

from smartlink.components.links import (
    build_link,
    classify,
    default_icon,
    detect_social_platform,
    link_css_class,
    normalize_color,
    normalize_url,
    validate_link_data,
)
from smartlink.domain.entities import Link


class TestNormalizeUrl:
    @pytest.mark.parametrize(
        "url",
        ["https://a.com", "http://a.com", "mailto:x@a.com", "tel:123"],
    )
    def test_known_schemes_untouched(self, url):
        assert normalize_url(url) == url

    def test_scheme_less_gets_https(self):
        assert normalize_url("a.com/path") == "https://a.com/path"

    def test_normalized_url_is_stable(self):
        once = normalize_url("a.com")
        assert normalize_url(once) == once


class TestIcons:
    def test_type_icons(self):
        assert default_icon("social") == "fas fa-share-alt"
        assert default_icon("phone") == "fas fa-phone"
        assert default_icon("spotify") == "fab fa-spotify"

    def test_unknown_type_gets_link_icon(self):
        assert default_icon("podcast") == "fas fa-link"

    def test_unknown_type_is_stored_as_given(self):
        link = build_link("Pod", "pod.fm", link_type="podcast")
        assert link.type == "podcast"
        assert link.icon == "fas fa-link"


class TestColor:
    def test_blank_is_null(self):
        assert normalize_color(None) is None
        assert normalize_color("  ") is None

    def test_theme_default_is_null(self):
        assert normalize_color("#0d6efd") is None

    def test_custom_color_kept(self):
        assert normalize_color(" #123456 ") == "#123456"


class TestClassification:
    @pytest.mark.parametrize(
        "url,platform",
        [
            ("https://instagram.com/ada", "instagram"),
            ("https://youtu.be/xyz", "youtube"),
            ("https://open.spotify.com/artist/1", "spotify"),
            ("https://x.com/ada", "twitter"),
            ("https://github.com/ada", "github"),
            ("https://example.com", None),
        ],
    )
    def test_detect_social_platform(self, url, platform):
        assert detect_social_platform(url) == platform

    def test_only_social_links_are_classified(self):
        social = Link(title="GH", url="https://github.com/ada", type="social")
        plain = Link(title="GH", url="https://github.com/ada", type="default")

        assert classify(social) == "github"
        assert classify(plain) is None
        assert link_css_class(social) == "social-github"
        assert link_css_class(plain) == ""


class TestValidation:
    def test_both_missing(self):
        errors = validate_link_data("", None)
        assert [e.field for e in errors] == ["title", "url"]

    def test_valid(self):
        assert validate_link_data("Site", "site.com") == []
