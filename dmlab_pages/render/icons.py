"""Inline SVG icons and badge lookup tables used by the card templates."""

from __future__ import annotations

import dataclasses as dc

from markupsafe import Markup

_SVG = (
    '<svg width="{size}" height="{size}" viewBox="0 0 24 24" fill="none" '
    'stroke="currentColor" stroke-width="2" aria-hidden="true">{body}</svg>'
)

_ICON_BODIES = {
    "database": (
        '<ellipse cx="12" cy="5" rx="9" ry="3"></ellipse>'
        '<path d="M21 12c0 1.66-4 3-9 3s-9-1.34-9-3"></path>'
        '<path d="M3 5v14c0 1.66 4 3 9 3s9-1.34 9-3V5"></path>'
    ),
    "cpu": (
        '<rect x="4" y="4" width="16" height="16" rx="2" ry="2"></rect>'
        '<rect x="9" y="9" width="6" height="6"></rect>'
        '<line x1="9" y1="1" x2="9" y2="4"></line>'
        '<line x1="15" y1="1" x2="15" y2="4"></line>'
        '<line x1="9" y1="20" x2="9" y2="23"></line>'
        '<line x1="15" y1="20" x2="15" y2="23"></line>'
        '<line x1="20" y1="9" x2="23" y2="9"></line>'
        '<line x1="20" y1="14" x2="23" y2="14"></line>'
        '<line x1="1" y1="9" x2="4" y2="9"></line>'
        '<line x1="1" y1="14" x2="4" y2="14"></line>'
    ),
    "bar-chart": (
        '<line x1="12" y1="20" x2="12" y2="10"></line>'
        '<line x1="18" y1="20" x2="18" y2="4"></line>'
        '<line x1="6" y1="20" x2="6" y2="16"></line>'
    ),
    "trending-up": (
        '<polyline points="23 6 13.5 15.5 8.5 10.5 1 18"></polyline>'
        '<polyline points="17 6 23 6 23 12"></polyline>'
    ),
    "message-circle": (
        '<path d="M21 11.5a8.38 8.38 0 0 1-.9 3.8 8.5 8.5 0 0 1-7.6 4.7 8.38 8.38 0 0 '
        "1-3.8-.9L3 21l1.9-5.7a8.38 8.38 0 0 1-.9-3.8 8.5 8.5 0 0 1 4.7-7.6 8.38 8.38 "
        '0 0 1 3.8-.9h.5a8.48 8.48 0 0 1 8 8v.5z"></path>'
    ),
    "book-open": (
        '<path d="M2 3h6a4 4 0 0 1 4 4v14a3 3 0 0 0-3-3H2z"></path>'
        '<path d="M22 3h-6a4 4 0 0 0-4 4v14a3 3 0 0 1 3-3h7z"></path>'
    ),
    "file": (
        '<path d="M14 2H6a2 2 0 0 0-2 2v16a2 2 0 0 0 2 2h12a2 2 0 0 0 2-2V8z"></path>'
        '<polyline points="14 2 14 8 20 8"></polyline>'
    ),
    "external": (
        '<path d="M18 13v6a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2V8a2 2 0 0 1 2-2h6"></path>'
        '<polyline points="15 3 21 3 21 9"></polyline>'
        '<line x1="10" y1="14" x2="21" y2="3"></line>'
    ),
    "clipboard": (
        '<path d="M16 4h2a2 2 0 0 1 2 2v14a2 2 0 0 1-2 2H6a2 2 0 0 1-2-2V6a2 2 0 0 1 '
        '2-2h2"></path><rect x="8" y="2" width="8" height="4" rx="1" ry="1"></rect>'
    ),
    "map-pin": (
        '<path d="M21 10c0 7-9 13-9 13s-9-6-9-13a9 9 0 0 1 18 0z"></path>'
        '<circle cx="12" cy="10" r="3"></circle>'
    ),
    "calendar": (
        '<rect x="3" y="4" width="18" height="18" rx="2" ry="2"></rect>'
        '<line x1="16" y1="2" x2="16" y2="6"></line>'
        '<line x1="8" y1="2" x2="8" y2="6"></line>'
        '<line x1="3" y1="10" x2="21" y2="10"></line>'
    ),
    "user": (
        '<path d="M20 21v-2a4 4 0 0 0-4-4H8a4 4 0 0 0-4 4v2"></path>'
        '<circle cx="12" cy="7" r="4"></circle>'
    ),
    "play": '<polygon points="5 3 19 12 5 21 5 3"></polygon>',
    "globe": (
        '<circle cx="12" cy="12" r="10"></circle>'
        '<line x1="2" y1="12" x2="22" y2="12"></line>'
        '<path d="M12 2a15.3 15.3 0 0 1 4 10 15.3 15.3 0 0 1-4 10 15.3 15.3 0 0 '
        '1-4-10 15.3 15.3 0 0 1 4-10z"></path>'
    ),
}


def icon(name: str | None, size: int = 16, *, fallback: str = "database") -> Markup:
    """Return the inline SVG for ``name``, or the ``fallback`` icon."""
    body = _ICON_BODIES.get(name or "", _ICON_BODIES[fallback])
    return Markup(_SVG.format(size=size, body=body))


@dc.dataclass(slots=True, frozen=True)
class Badge:
    label: str
    css_class: str
    glyph: str = ""


NEWS_TYPE_BADGES = {
    "announcement": Badge("Announcement", "badge-info", "📢"),
    "award": Badge("Award", "badge-success", "🏆"),
    "event": Badge("Event", "badge-primary", "📅"),
    "publication": Badge("Publication", "badge-secondary", "📄"),
}

PROJECT_STATUS_BADGES = {
    "active": Badge("Active", "badge-success"),
    "completed": Badge("Completed", "badge-info"),
    "upcoming": Badge("Upcoming", "badge-warning"),
}

PROJECT_TYPE_BADGES = {
    "EU-funded": Badge("EU", "badge-eu"),
    "National": Badge("National", "badge-national"),
    "Industry": Badge("Industry", "badge-industry"),
    "Internal": Badge("Internal", "badge-internal"),
}

PUBLICATION_KIND_BADGES = {
    "journal": Badge("Journal", "journal", "📄"),
    "conference": Badge("Conference", "conference", "🎤"),
    "chapter": Badge("Book Chapter", "chapter", "📚"),
    "workshop": Badge("Workshop", "workshop", "🔧"),
    "preprint": Badge("Preprint", "preprint", "📝"),
}


def news_badge(kind: str | None) -> Badge:
    return NEWS_TYPE_BADGES.get(
        (kind or "").lower(), Badge(kind or "News", "badge-default", "📌")
    )


def status_badge(status: str | None) -> Badge:
    return PROJECT_STATUS_BADGES.get(
        status or "", Badge(status or "Unknown", "badge-default")
    )


def project_type_badge(project_type: str | None) -> Badge | None:
    if not project_type:
        return None
    return PROJECT_TYPE_BADGES.get(
        project_type, Badge(project_type, "badge-default")
    )


def publication_badge(kind: str, label: str | None = None) -> Badge:
    """Return the badge for a publication kind, keeping the record's own label."""
    badge = PUBLICATION_KIND_BADGES.get(kind)
    if badge is None:
        return Badge(label or "Publication", "other", "📄")
    return Badge(label or badge.label, badge.css_class, badge.glyph)


__all__ = [
    "Badge",
    "icon",
    "news_badge",
    "project_type_badge",
    "publication_badge",
    "status_badge",
]
