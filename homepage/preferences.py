"""Dark-mode preference cookie."""

from datetime import datetime, timedelta, timezone
from typing import NamedTuple

from starlette.requests import Request
from starlette.responses import Response

DARK = "dark"
LIGHT = "light"


class DarkModePreference(NamedTuple):
    enabled: bool
    # True when the client sent no cookie and a default must be issued
    needs_cookie: bool


def resolve_dark_mode(request: Request, cookie_name: str) -> DarkModePreference:
    """Read the preference cookie; any value other than ``dark`` means light mode."""
    value = request.cookies.get(cookie_name)
    if value is None:
        return DarkModePreference(enabled=False, needs_cookie=True)
    return DarkModePreference(enabled=value == DARK, needs_cookie=False)


def set_default_cookie(
    request: Request,
    response: Response,
    cookie_name: str,
    max_age_days: int = 365,
) -> None:
    """Attach the default ``light`` cookie, scoped to the request host."""
    response.set_cookie(
        cookie_name,
        LIGHT,
        expires=datetime.now(timezone.utc) + timedelta(days=max_age_days),
        domain=request.url.hostname,
        samesite="strict",
    )
