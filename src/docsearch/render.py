"""Render contract for ranked entries.

Top-level entries link to their own page, ``{kind}.{name}.html``. Members
link to an anchor on their parent's page,
``{parent_kind}.{parent_name}.html#{kind}.{name}``, with the parent linked
separately so ``Parent.member`` reads as two links joined by a dot.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from docsearch.models.index import IndexEntry


@dataclass(frozen=True, slots=True)
class Link:
    href: str
    text: str
    css_class: str


def page_href(kind: str, name: str) -> str:
    return f"{kind}.{name}.html"


def entry_links(entry: IndexEntry) -> list[Link]:
    """Parent link (members only) followed by the entry's own link."""
    if entry.parent_name is not None and entry.parent_kind is not None:
        parent_page = page_href(entry.parent_kind, entry.parent_name)
        return [
            Link(href=parent_page, text=entry.parent_name, css_class=entry.parent_kind),
            Link(
                href=f"{parent_page}#{entry.kind}.{entry.name}",
                text=entry.name,
                css_class=entry.kind,
            ),
        ]
    return [Link(href=page_href(entry.kind, entry.name), text=entry.name, css_class=entry.kind)]


def entry_label(entry: IndexEntry) -> str:
    return ".".join(link.text for link in entry_links(entry))


def _anchor(link: Link) -> str:
    return (
        f'<a class="{escape(link.css_class)}" href="{escape(link.href)}">'
        f"{escape(link.text)}</a>"
    )


def render_result_html(entry: IndexEntry) -> str:
    code = ".".join(_anchor(link) for link in entry_links(entry))
    return f"<h3><code>{code}</code></h3>"
