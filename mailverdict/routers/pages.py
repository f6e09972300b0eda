from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

router = APIRouter()

_INDEX = Path(__file__).resolve().parent.parent / "static" / "index.html"


@router.get("/", response_class=HTMLResponse)
async def index():
    if not _INDEX.exists():
        raise HTTPException(404, "Page not found")
    return HTMLResponse(_INDEX.read_text(encoding="utf-8"))
