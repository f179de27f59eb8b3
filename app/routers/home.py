# =============================================================================
# app/routers/home.py - Landing Page
# =============================================================================

from fastapi import APIRouter, Request

from app.templating import render

router = APIRouter()


@router.get("/")
async def home(request: Request):
    """Landing page with links to each section."""
    return render(request, "home.html")
