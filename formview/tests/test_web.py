"""
Request glue: loading posted forms in FastAPI views.

Why:
    The typical view posts bracketed field names, loads them into a form
    model, validates and re-renders the fields. This exercises the whole chain
    through a real ASGI app with httpx.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from httpx import ASGITransport, AsyncClient

from formview.tests.stubs import LoginForm
from formview.web import load_from_request, read_form_data
from formview.widgets import ErrorSummary, Field


app = FastAPI()


@app.post("/login", response_class=HTMLResponse)
async def login(request: Request) -> str:
    form = LoginForm()
    if await load_from_request(form, request):
        form.validate()
    return ErrorSummary(form).render() + Field(form, "login").render()


@app.post("/echo")
async def echo(request: Request) -> dict:
    return await read_form_data(request)


@pytest.mark.anyio
async def test_posted_form_is_loaded_validated_and_rendered() -> None:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        r = await client.post("/login", data={"LoginForm[login]": "admin@.com", "LoginForm[password]": "123456"})

    assert r.status_code == 200
    html = r.text
    assert "<li>This value is not a valid email address.</li>" in html
    assert "<li>Is too short.</li>" in html
    assert 'value="admin@.com"' in html
    assert 'aria-invalid="true"' in html


@pytest.mark.anyio
async def test_post_without_form_scope_renders_pristine_form() -> None:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        r = await client.post("/login", data={"other": "x"})

    assert r.status_code == 200
    assert 'style="display:none"' in r.text
    assert "has-error" not in r.text


@pytest.mark.anyio
async def test_read_form_data_nests_bracketed_names() -> None:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        r = await client.post("/echo", data={"PersonalForm[roles][]": ["admin", "user"], "q": "x"})

    assert r.json() == {"PersonalForm": {"roles": ["admin", "user"]}, "q": "x"}
