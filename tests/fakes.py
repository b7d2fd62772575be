import copy

from blog_api.app.models import Blog, Entry
from blog_api.app.services.entry_store import EntryStore


class InMemoryEntryStore(EntryStore):
    """EntryStore double keeping blogs in insertion order."""

    def __init__(self, blogs=None):
        self.blogs = {blog.id: blog for blog in blogs or []}
        self.delete_calls = []

    def add_blog(self, blog_id, *entries):
        blog = Blog(id=blog_id, name=f"blog {blog_id}", handle=f"b{blog_id}")
        for entry_id, title, content in entries:
            blog.entries.append(Entry(id=entry_id, title=title, content=content, blog_id=blog_id))
        self.blogs[blog_id] = blog
        return blog

    def list_all_blogs_with_entries(self):
        return [copy.deepcopy(blog) for blog in self.blogs.values()]

    def get_blog_with_entries(self, blog_id):
        blog = self.blogs.get(blog_id)
        return copy.deepcopy(blog) if blog is not None else None

    def delete_entry(self, entry_id, blog_id):
        self.delete_calls.append((entry_id, blog_id))
        blog = self.blogs.get(blog_id)
        if blog is None:
            return 0
        for index, entry in enumerate(blog.entries):
            if entry.id == entry_id:
                del blog.entries[index]
                return 1
        return 0

    def entry_ids(self, blog_id=None):
        blogs = [self.blogs[blog_id]] if blog_id is not None else self.blogs.values()
        return sorted(entry.id for blog in blogs for entry in blog.entries)
