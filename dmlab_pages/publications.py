"""Filter, search, group, and export the lab's publication list.

The publications page lets readers narrow the list by year and type and run a
free-text search over titles, authors, abstracts, and keywords. This module
holds that pipeline as pure functions over :class:`Publication` records so the
page builder, the ``pages bibtex`` command, and tests share one
implementation.

Examples
--------
>>> from dmlab_pages.content import Publication
>>> pubs = [
...     Publication(id="a", title="Graph Mining", authors=["A. Author"], year=2023),
...     Publication(id="b", title="Media Streams", authors=["B. Author"], year=2021),
... ]
>>> [p.id for p in apply_filters(pubs, PublicationFilters(search="graph"))]
['a']
>>> list(group_by_year(pubs))
[2023, 2021]
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .content.models import Publication

_KIND_RULES: tuple[tuple[str, str], ...] = (
    ("journal", "journal"),
    ("conference", "conference"),
    ("workshop", "workshop"),
    ("chapter", "chapter"),
    ("preprint", "preprint"),
)

_BIBTEX_ENTRY_TYPES = {
    "journal": ("article", "journal"),
    "conference": ("inproceedings", "booktitle"),
    "workshop": ("inproceedings", "booktitle"),
    "chapter": ("incollection", "booktitle"),
    "preprint": ("misc", "howpublished"),
    "other": ("misc", "howpublished"),
}

_KEY_PATTERN = re.compile(r"[^A-Za-z0-9]+")


def _keeps_all(value: object | None) -> bool:
    return value is None or value == "" or value == "all"


@dc.dataclass(slots=True, frozen=True)
class PublicationFilters:
    """Active filter values; empty values do not constrain the list."""

    year: int | None = None
    type: str | None = None
    search: str = ""

    @property
    def is_empty(self) -> bool:
        return (
            self.year is None
            and _keeps_all(self.type)
            and not self.search.strip()
        )


def publication_kind(pub_type: str | None) -> str:
    """Classify a free-form type label by case-insensitive substring.

    >>> publication_kind("Journal Article")
    'journal'
    >>> publication_kind("book-chapter")
    'chapter'
    >>> publication_kind("Poster")
    'other'
    """
    lowered = (pub_type or "").lower()
    for needle, kind in _KIND_RULES:
        if needle in lowered:
            return kind
    return "other"


def matches_search(publication: Publication, search: str) -> bool:
    """Return True when ``search`` occurs in the title, authors, abstract or keywords."""
    needle = search.strip().lower()
    if not needle:
        return True
    haystacks = (
        publication.title,
        " ".join(publication.authors),
        publication.abstract or "",
        " ".join(publication.keywords),
    )
    return any(needle in text.lower() for text in haystacks)


def apply_filters(
    publications: cabc.Sequence[Publication], filters: PublicationFilters
) -> list[Publication]:
    """Return publications matching every active filter, in their original order."""
    results: list[Publication] = []
    for pub in publications:
        if filters.year is not None and pub.year != filters.year:
            continue
        if not _keeps_all(filters.type) and pub.type != filters.type:
            continue
        if not matches_search(pub, filters.search):
            continue
        results.append(pub)
    return results


def filter_by_year(
    publications: cabc.Sequence[Publication], year: int | str | None
) -> list[Publication]:
    if _keeps_all(year):
        return list(publications)
    wanted = int(year)  # type: ignore[arg-type]
    return [pub for pub in publications if pub.year == wanted]


def filter_by_type(
    publications: cabc.Sequence[Publication], pub_type: str | None
) -> list[Publication]:
    if _keeps_all(pub_type):
        return list(publications)
    return [pub for pub in publications if pub.type == pub_type]


def filter_by_tag(
    publications: cabc.Sequence[Publication], tag: str | None
) -> list[Publication]:
    if _keeps_all(tag):
        return list(publications)
    return [pub for pub in publications if tag in pub.tags]


def group_by_year(
    publications: cabc.Iterable[Publication],
) -> dict[int, list[Publication]]:
    """Group publications by year; years descend, entries keep their order."""
    grouped: dict[int, list[Publication]] = {}
    for pub in publications:
        grouped.setdefault(pub.year, []).append(pub)
    return {year: grouped[year] for year in sorted(grouped, reverse=True)}


def year_options(publications: cabc.Iterable[Publication]) -> list[int]:
    """Return the distinct publication years, newest first."""
    return sorted({pub.year for pub in publications}, reverse=True)


def type_options(publications: cabc.Iterable[Publication]) -> list[str]:
    """Return the distinct type labels in first-seen order."""
    return list(dict.fromkeys(pub.type for pub in publications if pub.type))


def bibtex_key(publication: Publication) -> str:
    """Return the citation key: the record id, else ``<surname><year>``."""
    if publication.id:
        return _KEY_PATTERN.sub("_", publication.id).strip("_") or publication.id
    surname = publication.authors[0].split()[-1] if publication.authors else "anon"
    return f"{_KEY_PATTERN.sub('', surname)}{publication.year}"


def generate_bibtex(publication: Publication) -> str:
    """Return the record's own BibTeX or build an entry from its fields."""
    if publication.bibtex:
        return publication.bibtex
    entry_type, venue_field = _BIBTEX_ENTRY_TYPES[publication_kind(publication.type)]
    fields = [
        ("title", publication.title),
        ("author", " and ".join(publication.authors)),
        (venue_field, publication.venue),
        ("year", str(publication.year)),
    ]
    if publication.doi:
        fields.append(("doi", publication.doi))
    body = ",\n".join(f"  {name}={{{value}}}" for name, value in fields if value)
    return f"@{entry_type}{{{bibtex_key(publication)},\n{body}\n}}"


def export_bibtex(publications: cabc.Iterable[Publication]) -> str:
    """Return every entry joined by blank lines, newline-terminated."""
    entries = [generate_bibtex(pub) for pub in publications]
    if not entries:
        return ""
    return "\n\n".join(entries) + "\n"


def search_text(publication: Publication) -> str:
    """Return the lowercase text a client-side search matches against."""
    parts = [
        publication.title,
        " ".join(publication.authors),
        publication.abstract or "",
        " ".join(publication.keywords),
    ]
    return " ".join(part for part in parts if part).lower()


__all__ = [
    "PublicationFilters",
    "apply_filters",
    "bibtex_key",
    "export_bibtex",
    "filter_by_tag",
    "filter_by_type",
    "filter_by_year",
    "generate_bibtex",
    "group_by_year",
    "matches_search",
    "publication_kind",
    "search_text",
    "type_options",
    "year_options",
]
