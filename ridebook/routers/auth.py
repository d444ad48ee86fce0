from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette import status

from ..deps.session import SessionProvider, get_session_provider
from ..schemas.auth import MeResponse, UserOut

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get(
    "/me",
    response_model=MeResponse,
    response_model_exclude_none=True,
    responses={401: {"description": "No signed-in user", "content": {"application/json": {"example": {"ok": False}}}}},
)
async def me(provider: SessionProvider = Depends(get_session_provider)):
    user = await provider.get_current_user()
    if user is None:
        return JSONResponse({"ok": False}, status_code=status.HTTP_401_UNAUTHORIZED)
    return MeResponse(ok=True, user=UserOut.model_validate(user))
