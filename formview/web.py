"""
Request glue for Starlette / FastAPI views.

Why:
    Starlette hands over posted fields as flat ``(name, value)`` pairs while
    form models expect ``{FormName: {attribute: value}}``. These helpers read
    the request body once and rebuild that shape from the bracketed input
    names the widgets render.

Usage:
    @app.post("/login", response_class=HTMLResponse)
    async def login(request: Request):
        form = LoginForm()
        if await load_from_request(form, request) and form.validate():
            ...
        return Field(form, "login").render()
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from starlette.requests import Request

from .model import FormModel, parse_form_data


logger = logging.getLogger("formview.web")


async def read_form_data(request: Request) -> dict[str, Any]:
    """Return the nested mapping encoded by the posted field names."""
    form_data = await request.form()
    return parse_form_data(form_data)


async def load_from_request(form: FormModel, request: Request, scope: Optional[str] = None) -> bool:
    """Load the posted data of ``request`` into ``form``.

    Returns:
        Result of `FormModel.load` (False when nothing for the form's scope
        was posted).
    """
    data = await read_form_data(request)
    loaded = form.load(data, scope)
    if not loaded:
        logger.debug("No data for %s in %s %s", type(form).__name__, request.method, request.url.path)
    return loaded


__all__ = ["read_form_data", "load_from_request"]
