"""Greeting API endpoint."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from greeter.greeting import render_greeting

router = APIRouter(tags=["greeting"])


@router.get("/", response_class=PlainTextResponse)
async def greet(request: Request):
    """Plain-text greeting with the environment mode, current time and input variable."""
    settings = request.app.state.settings
    clock = request.app.state.clock
    return render_greeting(settings, clock.now())
