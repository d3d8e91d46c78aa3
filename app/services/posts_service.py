import logging
from pathlib import Path
from typing import Dict, List, Optional

import frontmatter
from pydantic import ValidationError

from app.schemas.blog import PostDetail, PostSummary
from app.utils import calculate_reading_time

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo):
        self.repo = repo

    def list_posts(self) -> List[PostSummary]:
        posts = self._index(include_content=False)
        return sorted(posts.values(), key=lambda p: p.published_on, reverse=True)

    def get_post(self, slug: str) -> Optional[PostDetail]:
        return self._index(include_content=True).get(slug)

    def _index(self, include_content: bool) -> Dict[str, PostSummary]:
        """Map slug to post; the first file in sorted path order owns a slug."""
        posts: Dict[str, PostSummary] = {}
        for path in self.repo.list_post_files():
            post = self._load(path, include_content=include_content)
            if not post:
                continue
            if post.slug in posts:
                logger.warning(f"Duplicate slug {post.slug!r} in {path}, skipping")
                continue
            posts[post.slug] = post
        return posts

    def _load(self, path: Path, include_content: bool):
        try:
            text = self.repo.read(path)
        except OSError as e:
            logger.error(f"Error reading post file {path}: {e}")
            return None
        return parse_post(text, path.stem, include_content=include_content)


def parse_post(
    text: str, default_slug: str, include_content: bool = False
) -> Optional[PostSummary]:
    """Parse frontmatter and return a validated post, or None if it is malformed"""
    try:
        parsed = frontmatter.loads(text)
    except Exception as e:
        logger.warning(f"Failed to parse frontmatter for {default_slug}: {e}")
        return None

    metadata = dict(parsed.metadata or {})
    metadata.pop("content", None)
    metadata.setdefault("slug", default_slug)
    metadata["readingTime"] = calculate_reading_time(parsed.content)

    try:
        if include_content:
            return PostDetail(**metadata, content=parsed.content)
        return PostSummary(**metadata)
    except ValidationError as e:
        logger.warning(f"Invalid frontmatter for post {default_slug}: {e}")
        return None
