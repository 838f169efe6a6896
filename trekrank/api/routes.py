"""HTTP routes for TrekRank.

Endpoints
---------
- ``GET /?season=…&series=…&description=show`` – ranked episode page
- ``GET /health``                                – Health check
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from trekrank.core.exceptions import RenderError
from trekrank.core.logging_setup import get_logger
from trekrank.core.models import Episode, ViewModel
from trekrank.services.dataset import get_catalog
from trekrank.services.validator import validate
from trekrank.services.view import assemble

log = get_logger("api.routes")

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


# ── Dependencies ──────────────────────────────────────────────────────

def catalog(request: Request) -> Tuple[Episode, ...]:
    """The shared episode catalog configured on the application."""
    return get_catalog(getattr(request.app.state, "dataset_path", None))


# ── Query decoding ────────────────────────────────────────────────────

_BRACKETED = re.compile(r"^([^\[\]]+)\[([^\[\]]*)\]$")


def decode_query(items: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
    """Fold raw ``(name, value)`` pairs into strings, lists and dicts.

    ``a=1`` → ``"1"``; ``a=1&a=2`` and ``a[]=1`` → lists;
    ``a[k]=1`` → ``{"k": "1"}``.  Only plain single values stay strings.
    """
    decoded: Dict[str, Any] = {}
    for name, value in items:
        m = _BRACKETED.match(name)
        if m is None:
            if name not in decoded:
                decoded[name] = value
            elif isinstance(decoded[name], list):
                decoded[name].append(value)
            else:
                decoded[name] = [decoded[name], value]
            continue

        base, key = m.groups()
        current = decoded.get(base)
        if key == "":
            if isinstance(current, list):
                current.append(value)
            elif current is None:
                decoded[base] = [value]
            else:
                decoded[base] = [current, value]
        else:
            if not isinstance(current, dict):
                current = {} if current is None else {"": current}
                decoded[base] = current
            current[key] = value
    return decoded


# ═══════════════════════════════════════════════════════════════════════
# Web UI
# ═══════════════════════════════════════════════════════════════════════

def render_page(request: Request, view: ViewModel) -> str:
    try:
        tpl = templates.get_template("app.html")
        return tpl.render(request=request, view=view)
    except TemplateError as exc:
        raise RenderError(f"Cannot render page: {exc}") from exc


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, episodes: Tuple[Episode, ...] = Depends(catalog)):
    """``/?season=1-7&series=TNG|DS9|Voyager&description=show``"""
    config = validate(decode_query(request.query_params.multi_items()))
    view = assemble(episodes, config)
    return HTMLResponse(render_page(request, view))


@router.get("/health")
async def health(episodes: Tuple[Episode, ...] = Depends(catalog)):
    return {"status": "ok", "episodes": len(episodes)}
