import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.blog import PostDetail, PostSummary
from app.services.posts_service import PostsService
from app.site_config import SiteConfig, get_site_config
from app.theme import get_theme_config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/site-config", response_model=SiteConfig)
def read_site_config(config: SiteConfig = Depends(get_site_config)):
    return config


@router.get("/theme")
def read_theme(theme: Dict[str, Any] = Depends(get_theme_config)):
    return theme


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts frontmatter, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
