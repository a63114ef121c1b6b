"""
Aggregations over a list of blogs.

The helpers are pure: they accept any sequence of records exposing ``title``,
``author`` and ``likes`` attributes (``Blog`` entities, ``BlogRead`` models)
and never touch the database. Whenever several candidates tie, the one that
appears first in the input wins.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional, Protocol, Sequence

from bloglist.core.models.io.stats import (
    AuthorBlogCount,
    AuthorLikes,
    BlogStats,
    FavoriteBlog,
)


class BlogLike(Protocol):
    title: str
    author: Optional[str]
    likes: int


def total_likes(blogs: Sequence[BlogLike]) -> int:
    """Sum of the likes of all blogs."""
    return sum(blog.likes for blog in blogs)


def favorite_blog(blogs: Sequence[BlogLike]) -> Optional[FavoriteBlog]:
    """The blog with the most likes, or ``None`` for an empty list."""
    if not blogs:
        return None

    # max() keeps the first of several equal maxima
    favorite = max(blogs, key=lambda blog: blog.likes)
    return FavoriteBlog(title=favorite.title, author=favorite.author, likes=favorite.likes)


def most_blogs(blogs: Sequence[BlogLike]) -> Optional[AuthorBlogCount]:
    """The author with the largest number of blogs, or ``None`` for an empty list."""
    if not blogs:
        return None

    counts = Counter(blog.author for blog in blogs)
    author = max(counts, key=counts.__getitem__)
    return AuthorBlogCount(author=author, blogs=counts[author])


def most_likes(blogs: Sequence[BlogLike]) -> Optional[AuthorLikes]:
    """The author whose blogs have the most likes in total, or ``None`` for an empty list."""
    if not blogs:
        return None

    likes: Counter = Counter()
    for blog in blogs:
        likes[blog.author] += blog.likes
    author = max(likes, key=likes.__getitem__)
    return AuthorLikes(author=author, likes=likes[author])


def summarize(blogs: Sequence[BlogLike]) -> BlogStats:
    return BlogStats(
        total_likes=total_likes(blogs),
        favorite_blog=favorite_blog(blogs),
        most_blogs=most_blogs(blogs),
        most_likes=most_likes(blogs),
    )
