"""
Keyword based entry cleanup.

``CleanupService`` removes every entry whose title or content contains
a keyword, compared case-insensitively.  The scope is either all blogs
(``clean_all``) or a single blog (``clean_one``).  Each matching entry
is deleted by its ``(entry id, blog id)`` pair, so a delete that races
with another cleanup simply affects no rows.

An empty keyword is contained in every string and therefore removes
every entry in scope.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.errors import NotFoundError
from ..models import Blog, Entry
from .entry_store import EntryStore

ENTITY_NAME = "blog"


def matches(entry: Entry, keyword: str) -> bool:
    """Return ``True`` if ``keyword`` (already lower-cased) occurs in the entry."""
    title = (entry.title or "").lower()
    content = (entry.content or "").lower()
    return keyword in title or keyword in content


class CleanupService:
    """Delete entries containing a keyword, across all blogs or within one."""

    def __init__(self, store: EntryStore, logger: Optional[logging.Logger] = None) -> None:
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    def clean_all(self, keyword: str) -> None:
        """Delete matching entries from every blog.

        Always succeeds, including when nothing matches or no blogs
        exist.
        """
        keyword = keyword.lower()
        self.logger.debug("Request to clean keyword '%s' from all blogs", keyword)
        blogs = self.store.list_all_blogs_with_entries()
        self._clean(blogs, keyword, scope="all")

    def clean_one(self, blog_id: int, keyword: str) -> None:
        """Delete matching entries from one blog.

        Raises
        ------
        NotFoundError
            If ``blog_id`` does not refer to an existing blog.  Nothing
            is deleted in that case.
        """
        keyword = keyword.lower()
        self.logger.debug("Request to clean keyword '%s' from blog %s", keyword, blog_id)
        blog = self.store.get_blog_with_entries(blog_id)
        if blog is None:
            raise NotFoundError(ENTITY_NAME, blog_id)
        self._clean([blog], keyword, scope=f"blog {blog_id}")

    def _clean(self, blogs: Iterable[Blog], keyword: str, scope: str) -> None:
        matched = 0
        deleted = 0
        for blog in blogs:
            for entry in blog.entries:
                if not matches(entry, keyword):
                    continue
                matched += 1
                affected = self.store.delete_entry(entry.id, blog.id)
                if affected:
                    self.logger.debug("Deleted entry %s of blog %s", entry.id, blog.id)
                else:
                    self.logger.debug("Entry %s of blog %s was already gone", entry.id, blog.id)
                deleted += affected
        self.logger.info(
            "Cleaned keyword '%s' from %s: %d matched, %d deleted",
            keyword,
            scope,
            matched,
            deleted,
        )
