"""RSS and sitemap generation over published blog posts."""

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Callable, List
from xml.etree import ElementTree as ET

from domain.entities.blog_post import BlogPost
from domain.repositories.unit_of_work import IUnitOfWork

ATOM_NS = "http://www.w3.org/2005/Atom"
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
EXCERPT_FALLBACK_LENGTH = 200
DEFAULT_CATEGORY = "eLearning"

# (path, changefreq, priority)
STATIC_PAGES = (
    ("", "weekly", "1.0"),
    ("/about", "monthly", "0.8"),
    ("/portfolio", "weekly", "0.9"),
    ("/blog", "weekly", "0.9"),
    ("/contact", "monthly", "0.7"),
)

ET.register_namespace("atom", ATOM_NS)


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def summarize(post: BlogPost) -> str:
    """Excerpt, or the first characters of the content when there is none."""
    if post.excerpt:
        return post.excerpt
    return post.content[:EXCERPT_FALLBACK_LENGTH] + "..."


class FeedService:
    """Builds public XML feeds for the blog."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        site_url: str,
        title: str,
        description: str,
        author: str = "",
        feed_url: str = "",
    ) -> None:
        self._uow_factory = uow_factory
        self._site_url = site_url.rstrip("/")
        self._title = title
        self._description = description
        self._author = author
        self._feed_url = feed_url

    async def _published_posts(self) -> List[BlogPost]:
        async with self._uow_factory() as uow:
            return await uow.blog_posts.get_all(published_only=True)

    def post_url(self, post: BlogPost) -> str:
        return f"{self._site_url}/blog/{post.id}"

    async def rss(self) -> bytes:
        """RSS 2.0 document of published posts, newest first."""
        posts = await self._published_posts()

        rss = ET.Element("rss", {"version": "2.0"})
        channel = ET.SubElement(rss, "channel")
        ET.SubElement(channel, "title").text = self._title
        ET.SubElement(channel, "description").text = self._description
        ET.SubElement(channel, "link").text = self._site_url
        if self._feed_url:
            ET.SubElement(
                channel,
                f"{{{ATOM_NS}}}link",
                {"href": self._feed_url, "rel": "self", "type": "application/rss+xml"},
            )
        ET.SubElement(channel, "language").text = "en-gb"
        if self._author:
            ET.SubElement(channel, "managingEditor").text = self._author
        ET.SubElement(channel, "lastBuildDate").text = format_datetime(
            datetime.now(timezone.utc), usegmt=True
        )

        for post in posts:
            item = ET.SubElement(channel, "item")
            link = self.post_url(post)
            ET.SubElement(item, "title").text = post.title
            ET.SubElement(item, "description").text = summarize(post)
            ET.SubElement(item, "link").text = link
            ET.SubElement(item, "guid", {"isPermaLink": "true"}).text = link
            ET.SubElement(item, "pubDate").text = format_datetime(
                _as_utc(post.created_at), usegmt=True
            )
            ET.SubElement(item, "category").text = post.category or DEFAULT_CATEGORY

        return ET.tostring(rss, encoding="utf-8", xml_declaration=True)

    async def sitemap(self) -> bytes:
        """Sitemap with the static site pages plus one entry per published post."""
        posts = await self._published_posts()
        now = datetime.now(timezone.utc).isoformat()

        urlset = ET.Element("urlset", {"xmlns": SITEMAP_NS})
        for path, changefreq, priority in STATIC_PAGES:
            self._add_url(urlset, f"{self._site_url}{path}", now, changefreq, priority)
        for post in posts:
            self._add_url(
                urlset,
                self.post_url(post),
                _as_utc(post.updated_at).isoformat(),
                "monthly",
                "0.6",
            )

        return ET.tostring(urlset, encoding="utf-8", xml_declaration=True)

    @staticmethod
    def _add_url(
        urlset: ET.Element, loc: str, lastmod: str, changefreq: str, priority: str
    ) -> None:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = loc
        ET.SubElement(url, "lastmod").text = lastmod
        ET.SubElement(url, "changefreq").text = changefreq
        ET.SubElement(url, "priority").text = priority
