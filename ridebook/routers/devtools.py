from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(include_in_schema=False)


# Chrome DevTools asks for this on every page load; answer quietly.
@router.get("/.well-known/appspecific/com.chrome.devtools.json")
def devtools_discovery() -> dict:
    return {}
