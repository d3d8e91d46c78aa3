from pathlib import Path
from typing import Optional, Protocol

from fastapi import Depends
from fastapi.templating import Jinja2Templates
from markupsafe import Markup
from pydantic import BaseModel

from app.settings import Settings, get_settings, settings
from app.site_config import SiteConfig, get_site_config, site_config
from app.utils import cx

TEMPLATES_DIR = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

LIGHT_BODY_CLASSES = "bg-material-light text-gray-800"
DARK_BODY_CLASSES = "dark:bg-material-dark dark:text-gray-50"


class DocumentProps(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    body: str = ""
    path: str = "/"


class DocumentRenderer(Protocol):
    def __call__(self, props: DocumentProps) -> str: ...


def render_document(
    props: DocumentProps,
    *,
    config: SiteConfig = site_config,
    current_settings: Settings = settings,
) -> str:
    """
    Wrap already-rendered page markup in the html/head/body shell shared
    by every page, appending the async helpdesk widget script.
    """
    title = (
        f"{props.title} | {config.siteName}" if props.title else config.siteName
    )
    template = templates.get_template("_document.html")
    return template.render(
        site=config,
        title=title,
        description=props.description or config.siteDescription,
        canonical_url=config.siteUrl.rstrip("/") + props.path,
        stylesheet=current_settings.STYLESHEET_PATH,
        body_class=cx(LIGHT_BODY_CLASSES, DARK_BODY_CLASSES),
        body=Markup(props.body),
        helpdesk_script_url=current_settings.HELPDESK_SCRIPT_URL,
    )


def get_document_renderer(
    config: SiteConfig = Depends(get_site_config),
    current_settings: Settings = Depends(get_settings),
) -> DocumentRenderer:
    def render(props: DocumentProps) -> str:
        return render_document(props, config=config, current_settings=current_settings)

    return render


def render_partial(name: str, **context) -> str:
    """Render an inner page template to a string for the document body."""
    return templates.get_template(name).render(**context)
