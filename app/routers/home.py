# =============================================================================
# app/routers/home.py - Home Page
# =============================================================================
# Server-rendered home page. Builds the HomeData view model from the cache
# and renders templates/home.html through Jinja2.
# =============================================================================

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from jinja2 import TemplateError

from app.config import settings
from app.dependencies import RedisDep, TemplatesDep
from app.exceptions import TemplateRenderError
from core.models.home import HomeData
from core.services.first_hit_service import FirstHitService

logger = logging.getLogger(__name__)

router = APIRouter()

HOME_TEMPLATE = "home.html"


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home(request: Request, redis: RedisDep, templates: TemplatesDep) -> HTMLResponse:
    """
    Serve the home page.

    Shows when the page was first requested since the cache was last empty.
    """
    data = HomeData(
        first_hit=await FirstHitService.resolve(redis),
        title=settings.APP_TITLE,
        message=await FirstHitService.get_message(redis),
    )

    try:
        template = templates.get_template(HOME_TEMPLATE)
        body = template.render(request=request, **data.model_dump())
    except TemplateError as e:
        logger.error(f"Failed to render {HOME_TEMPLATE}: {e}")
        raise TemplateRenderError(HOME_TEMPLATE) from e

    return HTMLResponse(content=body)
