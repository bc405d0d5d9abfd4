"""
Route‑level authorization gate.

``authorize`` decides, from whether a session exists and the requested
path alone, if a request may proceed:

* paths under the dashboard prefix require a session;
* any other path visited with a session sends the user to the
  dashboard root (e.g. the login page once signed in);
* everything else is allowed.

``middleware.auth`` turns the decisions into HTTP responses.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .config import settings


@dataclass(frozen=True)
class Allow:
    pass


@dataclass(frozen=True)
class Deny:
    pass


@dataclass(frozen=True)
class RedirectTo:
    url: str


Decision = Union[Allow, Deny, RedirectTo]


def authorize(session_present: bool, path: str, dashboard_path: Optional[str] = None) -> Decision:
    """Return the gate decision for ``path``."""
    dashboard = dashboard_path or settings.dashboard_path
    if path.startswith(dashboard):
        if session_present:
            return Allow()
        return Deny()
    if session_present:
        return RedirectTo(dashboard)
    return Allow()
