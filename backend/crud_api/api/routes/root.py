"""Root Page — the users service's plain HTML greeting."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["root"])


@router.get("/", response_class=HTMLResponse)
async def root():
    return "<h1>Hello, World!</h1>"
