import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from app.api.v1.health import router as health_router
from app.api.v1.auth import router as auth_router
from app.api.v1.assessment import router as assessment_router
from app.api.v1.journal import router as journal_router
from app.api.v1.careers import router as careers_router
from app.api.v1.dashboard import router as dashboard_router
from app.core.cors import cors_allow_credentials, cors_allow_origin_regex, cors_allowed_origins
from app.core.rate_limit import limiter
from app.core.config import settings
from dotenv import load_dotenv
from app.core.lifespan import lifespan
from app.storage import StoreError

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Career Compass API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_origin_regex=cors_allow_origin_regex(),
    allow_credentials=cors_allow_credentials(),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(StoreError)
async def _store_error_handler(request: Request, exc: StoreError):
    logging.getLogger("app.storage").error("store_error path=%s: %s", request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": "Storage is temporarily unavailable."})


app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(auth_router, prefix="/v1", tags=["Auth"])
app.include_router(assessment_router, prefix="/v1", tags=["Assessment"])
app.include_router(journal_router, prefix="/v1", tags=["Journal"])
app.include_router(careers_router, prefix="/v1", tags=["Careers"])
app.include_router(dashboard_router, prefix="/v1", tags=["Dashboard"])
