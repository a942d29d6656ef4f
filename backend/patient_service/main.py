import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
from patient_service.config import get_settings
from patient_service.database import engine, Base
from patient_service.routers import patients

settings = get_settings()

# set up logging
log_level = {"debug": logging.DEBUG, "info": logging.INFO, "warning": logging.WARNING, "error": logging.ERROR,
             "critical": logging.CRITICAL}
logging.basicConfig(level=log_level.get(settings.log_level.lower(), logging.INFO))
_LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create any missing tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    _LOGGER.info("Patient store ready")
    yield
    # Shutdown
    await engine.dispose()


app = FastAPI(
    title=settings.api_title,
    description="Patient records for the doctor's dashboard",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class NoCacheMiddleware(BaseHTTPMiddleware):
    """Middleware to add no-cache headers so a dashboard refresh always sees current records."""
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, proxy-revalidate, max-age=0"
        response.headers["Expires"] = "0"
        response.headers["Pragma"] = "no-cache"
        return response


app.add_middleware(NoCacheMiddleware)


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    _LOGGER.warning("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"success": False, "message": "Invalid request body"})


app.include_router(patients.router, prefix="/api/patients", tags=["Patients"])


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "server is ready"


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "service": "patient-dashboard"}
