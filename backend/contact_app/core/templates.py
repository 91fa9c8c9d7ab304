"""
Template rendering utilities
"""
from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from contact_app.core.config import get_settings

# Get templates directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent
TEMPLATES_DIR = BASE_DIR / "frontend" / "templates"
STATIC_DIR = BASE_DIR / "frontend" / "static"

# Create FastAPI templates instance
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_template(
    template_name: str,
    context: dict,
    request: Request,
    status_code: int = 200,
    headers: Optional[dict] = None,
):
    """Render template with context"""
    return templates.TemplateResponse(
        request,
        template_name,
        {"app_name": get_settings().app_name, **context},
        status_code=status_code,
        headers=headers,
    )
