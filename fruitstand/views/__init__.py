"""
Views Package - The 'V' in MVC

This package contains all view-related code:
- Jinja2 HTML templates in views/templates
- Render helpers that build each template's full context

Controllers never call the template engine directly; they hand model
data to one of the helpers below, which knows which template to use and
under which key the data is expected.

The environment uses StrictUndefined: a template that references a value
missing from its context fails loudly at render time instead of printing
an empty string.
"""

import os

from fastapi import Request
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from fruitstand.models import Fruit

templates_path = os.path.join(os.path.dirname(__file__), "templates")

templates = Jinja2Templates(
    env=Environment(
        loader=FileSystemLoader(templates_path),
        autoescape=True,
        undefined=StrictUndefined,
    )
)


def _base_context(request: Request) -> dict:
    """Values every page needs from the layout."""
    return {"app_name": request.app.title}


def render_fruit_list(request: Request, fruits: tuple[Fruit, ...]):
    """Render the index page listing every fruit in store order."""
    context = _base_context(request)
    context["fruits"] = fruits
    return templates.TemplateResponse(request, "fruits/index.html", context)


def render_fruit_detail(request: Request, fruit: Fruit):
    """Render one fruit with its readiness sentence."""
    context = _base_context(request)
    context["fruit"] = fruit
    return templates.TemplateResponse(request, "fruits/show.html", context)


def render_error(request: Request, status_code: int, message: str):
    """Render the error page with the given status."""
    context = _base_context(request)
    context["status_code"] = status_code
    context["message"] = message
    return templates.TemplateResponse(
        request, "error.html", context, status_code=status_code
    )


__all__ = [
    "templates",
    "render_fruit_list",
    "render_fruit_detail",
    "render_error",
]
