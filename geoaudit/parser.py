"""
Parse HTML into the ContentRecord the analyzers work on.
"""

import json
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from .models import ContentRecord, Heading, Image, Link

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def _schema_types(data) -> list[str]:
    """Collect @type values from a JSON-LD document (objects, lists, @graph)."""
    if isinstance(data, list):
        return [t for item in data for t in _schema_types(item)]
    if not isinstance(data, dict):
        return []

    types = []
    t = data.get("@type")
    if isinstance(t, str):
        types.append(t)
    elif isinstance(t, list):
        types.extend(x for x in t if isinstance(x, str))
    types.extend(_schema_types(data.get("@graph", [])))
    return types


def _is_internal(href: str, host: str) -> bool:
    return href.startswith("/") or bool(host and host in href)


def parse_html(html: str, base_url: str | None = None, load_time_ms: int = 0) -> ContentRecord:
    soup = BeautifulSoup(html, "lxml")

    # Title
    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else ""

    # Meta description
    meta = soup.find("meta", attrs={"name": "description"})
    meta_description = (meta.get("content") or "") if meta else ""

    # Headings, in document order
    headings = []
    for heading in soup.find_all(HEADING_TAGS):
        text = heading.get_text(strip=True)
        if text:
            headings.append(Heading(level=int(heading.name[1]), text=text))

    # Images
    images = []
    for img in soup.find_all("img"):
        src = img.get("src", "")
        if not src:
            continue
        alt = img.get("alt") or ""
        images.append(Image(src=src, alt=alt, has_alt=bool(alt)))

    # Links
    host = (urlparse(base_url).hostname or "") if base_url else ""
    links = []
    for a in soup.find_all("a", href=True):
        href = a.get("href", "")
        text = a.get_text(strip=True)
        if href and text:
            links.append(Link(href=href, text=text, is_internal=_is_internal(href, host)))

    # Schema (JSON-LD)
    schema_scripts = soup.find_all("script", type="application/ld+json")
    schema_types = []
    for script in schema_scripts:
        try:
            schema_types.extend(_schema_types(json.loads(script.string or "")))
        except (json.JSONDecodeError, TypeError):
            pass

    # Body text + word count
    for el in soup(["script", "style", "noscript", "template"]):
        el.decompose()
    body = soup.body or soup
    content = " ".join(body.get_text(separator=" ").split())

    return ContentRecord(
        title=title,
        meta_description=meta_description,
        headings=headings,
        images=images,
        links=links,
        content=content,
        has_schema=bool(schema_scripts),
        schema_types=schema_types,
        load_time_ms=load_time_ms,
        word_count=len(content.split()),
    )
