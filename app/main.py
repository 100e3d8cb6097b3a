from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from app.api.exception_handlers import register_exception_handlers
from app.api.middleware import catch_technical_errors, require_api_key
from app.api.router import api_router
from app.core.config import settings

app = FastAPI(
    title="Book Management API",
    description="Catalog of books and authors, with ratings and ISBN lookup",
)

# Last added runs first: CORS, then the api key check, then error mapping
app.middleware("http")(catch_technical_errors)
app.middleware("http")(require_api_key)

if settings.frontend_url:
    parsed = urlparse(settings.frontend_url)
    origin = f"{parsed.scheme}://{parsed.netloc}"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)
app.include_router(api_router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok"}
