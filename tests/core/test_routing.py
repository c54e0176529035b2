# tests\core\test_routing.py
import pytest
from unittest.mock import patch

from pricing_gateway.core.domain import routing
from pricing_gateway.core.domain.models import LocaleAction, PathClass
from pricing_gateway.core.domain.routing import (
    LocalePolicy,
    classify_path,
    match_accept_language,
    parse_accept_language,
    resolve_locale,
    route_request,
    switch_locale_path,
)

POLICY = LocalePolicy()


class TestClassifyPath:
    def test_root(self):
        assert classify_path("/", POLICY).path_class == PathClass.ROOT

    @pytest.mark.parametrize("path", [
        "/dashboard",
        "/dashboard/products/12",
        "/landing",
        "/admin/users",
        "/api/pricing/apply",
        "/health/live",
        "/_next/static/chunk.js",
        "/favicon.ico",
    ])
    def test_excluded_paths(self, path):
        decision = classify_path(path, POLICY)
        assert decision.path_class == PathClass.EXCLUDED_DIRECT
        assert decision.matched_locale is None

    def test_prefix_match_is_plain_string_prefix(self):
        """'/dashboards' starts with '/dashboard', so it is treated as direct."""
        assert classify_path("/dashboards", POLICY).path_class == PathClass.EXCLUDED_DIRECT

    def test_supported_locale_segment_is_matched(self):
        decision = classify_path("/en/products", POLICY)
        assert decision.path_class == PathClass.LOCALE_PREFIXED
        assert decision.matched_locale == "en"

    def test_unknown_segment_has_no_locale(self):
        decision = classify_path("/products", POLICY)
        assert decision.path_class == PathClass.LOCALE_PREFIXED
        assert decision.matched_locale is None


class TestAcceptLanguage:
    def test_parse_orders_by_quality(self):
        assert parse_accept_language("de;q=0.5, en-US, fr;q=0.8") == ["en-us", "fr", "de"]

    def test_parse_drops_zero_quality_and_garbage(self):
        assert parse_accept_language("en;q=0, de;q=abc, fr") == ["fr"]

    def test_parse_empty_header(self):
        assert parse_accept_language(None) == []
        assert parse_accept_language("") == []

    def test_match_primary_subtag(self):
        assert match_accept_language("en-GB,en;q=0.9", ("de", "en")) == "en"

    def test_match_nothing_supported(self):
        assert match_accept_language("fr-FR, es", ("de", "en")) is None


class TestResolveLocale:
    def test_path_segment_wins(self):
        assert resolve_locale("en", preferred="de", accept_language="de", policy=POLICY) == "en"

    def test_preference_beats_browser(self):
        assert resolve_locale(None, preferred="en", accept_language="de", policy=POLICY) == "en"

    def test_browser_beats_default(self):
        assert resolve_locale(None, accept_language="en-US", policy=POLICY) == "en"

    def test_default_when_nothing_matches(self):
        assert resolve_locale(None, accept_language="fr", policy=POLICY) == "de"

    def test_unsupported_preference_is_kept(self):
        assert resolve_locale(None, preferred="fr", policy=POLICY) == "fr"


class TestRouteRequest:
    def test_root_never_negotiates(self):
        """
        Scenario: The root path with a browser language set.
        Expected: Passes on without locale negotiation running.
        """
        with patch.object(routing, "negotiate_locale") as negotiate:
            outcome = route_request("/", accept_language="en", policy=POLICY)

        negotiate.assert_not_called()
        assert outcome.action == LocaleAction.PASS
        assert outcome.decision.path_class == PathClass.ROOT
        assert outcome.locale is None

    def test_excluded_path_never_negotiates(self):
        with patch.object(routing, "negotiate_locale") as negotiate:
            outcome = route_request("/dashboard", preferred="fr", policy=POLICY)

        negotiate.assert_not_called()
        assert outcome.action == LocaleAction.PASS

    def test_prefixed_path_passes(self):
        outcome = route_request("/en/products", accept_language="de", policy=POLICY)
        assert outcome.action == LocaleAction.PASS
        assert outcome.locale == "en"
        assert outcome.location is None

    def test_unprefixed_path_redirects_to_default(self):
        outcome = route_request("/products", policy=POLICY)
        assert outcome.action == LocaleAction.REDIRECT
        assert outcome.location == "/de/products"

    def test_redirect_keeps_query(self):
        outcome = route_request("/products", query="page=2&sort=asc", accept_language="en", policy=POLICY)
        assert outcome.location == "/en/products?page=2&sort=asc"

    def test_unsupported_preference_is_not_found(self):
        outcome = route_request("/products", preferred="fr", policy=POLICY)
        assert outcome.action == LocaleAction.NOT_FOUND
        assert outcome.locale == "fr"

    def test_custom_policy(self):
        policy = LocalePolicy(supported_locales=("fr", "it"), default_locale="fr")
        outcome = route_request("/catalog", policy=policy)
        assert outcome.location == "/fr/catalog"


class TestSwitchLocalePath:
    def test_rewrites_active_segment(self):
        assert switch_locale_path("/de/products", "de", "en") == "/en/products"

    def test_keeps_deeper_segments(self):
        assert switch_locale_path("/de/products/12/edit", "de", "en") == "/en/products/12/edit"

    def test_unknown_segment_falls_back_to_locale_root(self):
        assert switch_locale_path("/xx/unknown", "de", "en") == "/en"

    def test_root_falls_back_to_locale_root(self):
        assert switch_locale_path("/", "de", "en") == "/en"
