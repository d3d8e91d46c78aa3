import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from app import dependencies as deps
from app.document import (
    DocumentProps,
    DocumentRenderer,
    get_document_renderer,
    render_partial,
)
from app.services.posts_service import PostsService
from app.site_config import SiteConfig, get_site_config

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=HTMLResponse)
RECENT_POSTS_LIMIT = 5


@router.get("/")
def home(
    config: SiteConfig = Depends(get_site_config),
    service: PostsService = Depends(deps.get_posts_service),
    render: DocumentRenderer = Depends(get_document_renderer),
):
    posts = service.list_posts()[:RECENT_POSTS_LIMIT]
    body = render_partial("index.html", site=config, posts=posts)
    return render(DocumentProps(body=body, path="/"))


@router.get("/posts")
def posts_index(
    config: SiteConfig = Depends(get_site_config),
    service: PostsService = Depends(deps.get_posts_service),
    render: DocumentRenderer = Depends(get_document_renderer),
):
    posts = service.list_posts()
    body = render_partial("posts.html", site=config, posts=posts)
    return render(DocumentProps(title="Posts", body=body, path="/posts"))


@router.get("/posts/{slug}")
def post_page(
    slug: str,
    config: SiteConfig = Depends(get_site_config),
    service: PostsService = Depends(deps.get_posts_service),
    render: DocumentRenderer = Depends(get_document_renderer),
):
    post = service.get_post(slug)
    if not post:
        logger.info(f"Post {slug} not found")
        raise HTTPException(status_code=404, detail="Post not found")

    body = render_partial("post.html", site=config, post=post)
    return render(
        DocumentProps(
            title=post.title,
            description=post.description,
            body=body,
            path=f"/posts/{post.slug}",
        )
    )
