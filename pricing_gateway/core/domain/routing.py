# pricing_gateway/core/domain/routing.py
"""
Locale routing rules.

Every inbound path is classified by an ordered predicate chain (first
match wins):

1. the root path belongs to the root redirect handler;
2. direct and technical prefixes pass through untouched;
3. everything else goes through locale negotiation.

All functions here are pure: they take strings and a `LocalePolicy` and
never touch a request object, so they can be exercised without a server.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from pricing_gateway.core.domain.models import (
    LocaleAction,
    LocaleOutcome,
    PathClass,
    RouteDecision,
)

DEFAULT_PASSTHROUGH_PREFIXES: Tuple[str, ...] = (
    "/api",
    "/health",
    "/docs",
    "/redoc",
    "/static",
    "/_next",
)


@dataclass(frozen=True)
class LocalePolicy:
    """
    Immutable routing configuration.

    Attributes
    ----------
    supported_locales:
        Locales that may appear as first path segment.
    default_locale:
        Used when neither path, preference nor browser yields a locale.
    direct_prefixes:
        Unprefixed application routes (dashboard, marketing, admin).
    passthrough_prefixes:
        Technical routes outside locale handling (API, probes, docs, assets).
    """

    supported_locales: Tuple[str, ...] = ("de", "en")
    default_locale: str = "de"
    root_path: str = "/"
    root_redirect: str = "/landing"
    direct_prefixes: Tuple[str, ...] = ("/dashboard", "/landing", "/admin")
    passthrough_prefixes: Tuple[str, ...] = DEFAULT_PASSTHROUGH_PREFIXES

    @classmethod
    def from_settings(cls, settings) -> "LocalePolicy":
        return cls(
            supported_locales=tuple(settings.SUPPORTED_LOCALES),
            default_locale=settings.DEFAULT_LOCALE,
            root_redirect=settings.ROOT_REDIRECT_PATH,
            direct_prefixes=tuple(settings.DIRECT_ROUTE_PREFIXES),
        )

    def is_supported(self, locale: Optional[str]) -> bool:
        return locale in self.supported_locales


DEFAULT_POLICY = LocalePolicy()


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def _first_segment(path: str) -> str:
    return path.split("/")[1] if path.startswith("/") else path.split("/")[0]


def _looks_like_file(path: str) -> bool:
    return "." in path.rsplit("/", 1)[-1]


def classify_path(path: str, policy: LocalePolicy = DEFAULT_POLICY) -> RouteDecision:
    """Assigns exactly one `PathClass` to `path`."""
    if path in ("", policy.root_path):
        return RouteDecision(path_class=PathClass.ROOT)

    excluded = policy.direct_prefixes + policy.passthrough_prefixes
    if path.startswith(excluded) or _looks_like_file(path):
        return RouteDecision(path_class=PathClass.EXCLUDED_DIRECT)

    segment = _first_segment(path)
    return RouteDecision(
        path_class=PathClass.LOCALE_PREFIXED,
        matched_locale=segment if policy.is_supported(segment) else None,
    )


# ---------------------------------------------------------------------------
# Negotiation
# ---------------------------------------------------------------------------


def parse_accept_language(header: Optional[str]) -> List[str]:
    """
    Returns the language tags of an Accept-Language header, lowercased and
    ordered by quality (ties keep header order). Tags with q=0 are dropped.
    """
    if not header:
        return []

    weighted = []
    for index, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip().lower()
        if not tag:
            continue
        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality > 0:
            weighted.append((-quality, index, tag))

    return [tag for _, _, tag in sorted(weighted)]


def match_accept_language(header: Optional[str], supported: Sequence[str]) -> Optional[str]:
    """Best supported locale for a browser header: exact tag first, then primary subtag."""
    for tag in parse_accept_language(header):
        if tag in supported:
            return tag
        primary = tag.split("-", 1)[0]
        if primary in supported:
            return primary
    return None


def _normalize_preference(preferred: Optional[str]) -> Optional[str]:
    if preferred is None:
        return None
    return preferred.strip().lower() or None


def resolve_locale(
    path_locale: Optional[str],
    preferred: Optional[str] = None,
    accept_language: Optional[str] = None,
    policy: LocalePolicy = DEFAULT_POLICY,
) -> str:
    """
    Picks the request locale: explicit path segment, then persisted
    preference, then browser language, then the default locale.

    The preference is taken as stored; it may name a locale that is not
    (or no longer) supported, which the caller turns into a not-found.
    """
    if path_locale:
        return path_locale
    preference = _normalize_preference(preferred)
    if preference:
        return preference
    return match_accept_language(accept_language, policy.supported_locales) or policy.default_locale


def negotiate_locale(
    decision: RouteDecision,
    path: str,
    *,
    query: str = "",
    preferred: Optional[str] = None,
    accept_language: Optional[str] = None,
    policy: LocalePolicy = DEFAULT_POLICY,
) -> LocaleOutcome:
    """Resolves the locale of a locale-eligible path and decides pass / redirect / not-found."""
    locale = resolve_locale(decision.matched_locale, preferred, accept_language, policy)

    if not policy.is_supported(locale):
        return LocaleOutcome(action=LocaleAction.NOT_FOUND, decision=decision, locale=locale)

    if decision.matched_locale == locale:
        return LocaleOutcome(action=LocaleAction.PASS, decision=decision, locale=locale)

    location = f"/{locale}{path}"
    if query:
        location = f"{location}?{query}"
    return LocaleOutcome(
        action=LocaleAction.REDIRECT,
        decision=decision,
        locale=locale,
        location=location,
    )


def route_request(
    path: str,
    *,
    query: str = "",
    preferred: Optional[str] = None,
    accept_language: Optional[str] = None,
    policy: LocalePolicy = DEFAULT_POLICY,
) -> LocaleOutcome:
    """
    Full routing decision for one request.

    Root and excluded paths pass without negotiation; the root redirect
    itself is served by its own handler.
    """
    decision = classify_path(path, policy)
    if decision.path_class != PathClass.LOCALE_PREFIXED:
        return LocaleOutcome(action=LocaleAction.PASS, decision=decision)

    return negotiate_locale(
        decision,
        path,
        query=query,
        preferred=preferred,
        accept_language=accept_language,
        policy=policy,
    )


# ---------------------------------------------------------------------------
# Language switching
# ---------------------------------------------------------------------------


def switch_locale_path(pathname: str, active_locale: str, new_locale: str) -> str:
    """
    Rewrites `pathname` for `new_locale`.

    Only a path whose first segment is the active locale is rewritten in
    place (`/de/products` -> `/en/products`); any other path falls back
    to the new locale's root (`/xx/unknown` -> `/en`).
    """
    segments = pathname.split("/")
    if len(segments) > 1 and segments[1] == active_locale:
        segments[1] = new_locale
        return "/".join(segments)
    return f"/{new_locale}"
