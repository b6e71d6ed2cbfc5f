from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from core.config import settings
from core.database import Base, engine
from core.errors import ConstraintViolation, ValidationError
from core.logging import get_logger, setup_logging
from routers import user_router, registration_router, organization_router, event_router, checkin_router
from routers import account_router, session_router, verification_router
from models import user, organization, event, checkin, account, session, verification  # noqa: F401

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if settings.CREATE_TABLES_ON_STARTUP:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ensured", extra={"prefix": settings.TABLE_PREFIX})
    yield


app = FastAPI(title="Hackathon Registration API", lifespan=lifespan)

# Respect X-Forwarded-Proto/Host when behind a proxy (Docker/nginx/etc.)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ConstraintViolation)
async def constraint_violation_handler(request: Request, exc: ConstraintViolation):
    return JSONResponse(
        status_code=409,
        content={"detail": exc.detail, "constraint": exc.constraint},
    )


@app.exception_handler(ValidationError)
async def registration_validation_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "errors": [e.to_dict() for e in exc.errors]},
    )


app.include_router(registration_router.router)
app.include_router(user_router.router)
app.include_router(organization_router.router)
app.include_router(event_router.router)
app.include_router(checkin_router.router)
app.include_router(account_router.router)
app.include_router(session_router.router)
app.include_router(verification_router.router)

@app.get("/")
def root():
    return {"message": "Hackathon Registration API Ready"}
