import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from quotes_api.core.config import settings
from quotes_api.core.http_middleware import install_http_middleware
from quotes_api.db.session import create_tables
from quotes_api.api.router import router as api_router

logging.getLogger("quotes_api").setLevel(settings.LOG_LEVEL)
_LOG = logging.getLogger("quotes_api.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_AUTO_CREATE:
        create_tables()
        _LOG.info("quotes table ready env=%s", settings.APP_ENV)
    yield


app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
install_http_middleware(app)

app.include_router(api_router, prefix=settings.API_PREFIX)

@app.get("/health")
def health():
    return {"status": "ok"}
