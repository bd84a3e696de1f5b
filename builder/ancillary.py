"""Sitemap, robots.txt and the hosting directive files."""

from datetime import date

from config.site import (
    GUIDES,
    HEADERS_FILE,
    HOTEL_DIR,
    NEIGHBORHOOD_DIR,
    REDIRECTS_FILE,
    ROBOTS_TEMPLATE,
    SITEMAP_PRIORITIES,
)
from models.enums import PageKind
from models.snapshot import SiteSnapshot
from builder.pages import RenderedPage

SITEMAP_HEADER = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">"""

SITEMAP_URL = """  <url>
    <loc>{loc}</loc>
    <lastmod>{lastmod}</lastmod>
    <priority>{priority}</priority>
  </url>"""


def sitemap_entries(snapshot: SiteSnapshot, site_url: str) -> list[tuple[str, str]]:
    """(absolute URL, priority) pairs: static pages, then neighborhoods, then hotels."""
    base = site_url.rstrip("/")
    entries = [
        (f"{base}/", SITEMAP_PRIORITIES[PageKind.HOME]),
        (f"{base}/contact", SITEMAP_PRIORITIES[PageKind.CONTACT]),
    ]
    entries += [(f"{base}/{slug}", SITEMAP_PRIORITIES[PageKind.GUIDE]) for slug in GUIDES]
    entries += [
        (f"{base}/{NEIGHBORHOOD_DIR}/{n.id}", SITEMAP_PRIORITIES[PageKind.NEIGHBORHOOD])
        for n in snapshot.neighborhoods
    ]
    entries += [
        (f"{base}/{HOTEL_DIR}/{h.slug}", SITEMAP_PRIORITIES[PageKind.HOTEL])
        for h in snapshot.hotels
    ]
    return entries


def build_sitemap(snapshot: SiteSnapshot, site_url: str, build_date: date) -> RenderedPage:
    lastmod = build_date.isoformat()
    urls = "\n".join(
        SITEMAP_URL.format(loc=loc, lastmod=lastmod, priority=priority)
        for loc, priority in sitemap_entries(snapshot, site_url)
    )
    return RenderedPage("sitemap.xml", f"{SITEMAP_HEADER}\n{urls}\n</urlset>")


def build_robots(site_url: str) -> RenderedPage:
    return RenderedPage("robots.txt", ROBOTS_TEMPLATE.format(site_url=site_url.rstrip("/")))


def build_headers() -> RenderedPage:
    return RenderedPage("_headers", HEADERS_FILE)


def build_redirects() -> RenderedPage:
    return RenderedPage("_redirects", REDIRECTS_FILE)
