import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from careercraft.api.v1.health import router as health_router
from careercraft.api.v1.ats import router as ats_router
from careercraft.api.v1.chat import router as chat_router
from careercraft.api.v1.jobs import router as jobs_router
from careercraft.api.v1.history import router as history_router
from careercraft.api.v1.learning import router as learning_router
from careercraft.api.v1.resume import router as resume_router
from careercraft.core.rate_limit import limiter
from careercraft.core.config import settings
from careercraft.core.lifespan import lifespan

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="CareerCraft AI API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_origin_regex=(settings.cors_allow_origin_regex or "").strip() or None,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/api", tags=["Health"])
app.include_router(ats_router, prefix="/api", tags=["ATS"])
app.include_router(chat_router, prefix="/api", tags=["Chat"])
app.include_router(jobs_router, prefix="/api", tags=["Jobs"])
app.include_router(history_router, prefix="/api", tags=["History"])
app.include_router(learning_router, prefix="/api", tags=["Learning"])
app.include_router(resume_router, prefix="/api", tags=["Resume"])
