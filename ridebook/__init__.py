"""Application wiring for the Ridebook booking and tracking API.

Configuration, database setup, middleware and routers are assembled here so
``ridebook.app`` is a ready FastAPI instance. ``ridebook.main`` adds logging,
the health check and Prometheus metrics on top for the served process.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .core.errors import http_exception_handler, validation_exception_handler
from .db.session import Base, engine
from .middlewares import RequestIdMiddleware, ResponseCacheMiddleware, SecurityHeadersMiddleware

# Importing the models registers their tables on ``Base.metadata``.
from .models import driver as _driver  # noqa: F401
from .models import user as _user  # noqa: F401
from .routers import auth as auth_router
from .routers import devtools as devtools_router
from .routers import drivers as drivers_router
from .routers import tracking as tracking_router

app = FastAPI(title=settings.APP_NAME)

# ---------- DB init ----------
Base.metadata.create_all(bind=engine)

# ---------- Middleware ----------
# Starlette runs the last added middleware first, so the cache sits closest to
# the routes and replayed bodies still get fresh request ids and headers.
cached_paths = {tracking_router.MOCK_FEED_PATH: settings.TRACK_MOCK_TTL_SECONDS}
app.add_middleware(
    ResponseCacheMiddleware,
    ttl_by_path=cached_paths,
    maxsize=settings.RESPONSE_CACHE_MAX_ENTRIES,
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestIdMiddleware)

# ---------- Routers ----------
app.include_router(devtools_router.router)
app.include_router(auth_router.router)
app.include_router(drivers_router.router)
app.include_router(tracking_router.router)

# ---------- Exception handling ----------
# Store and session failures are left to FastAPI's default 500.
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)


__all__ = ["app"]
