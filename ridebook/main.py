from prometheus_fastapi_instrumentator import Instrumentator

from ridebook.core.config import settings
from ridebook.core.logging import configure_logging
from . import app as ridebook_app

configure_logging()
app = ridebook_app
instrumentator = Instrumentator(excluded_handlers=["/metrics", "/health"])


@app.get("/health")
async def health() -> dict[str, bool]:
    return {"ok": True}


instrumentator.instrument(app).expose(app, include_in_schema=False)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("ridebook.main:app", host=settings.HOST, port=settings.PORT)
