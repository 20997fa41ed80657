from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.sessions import SessionMiddleware
from contextlib import asynccontextmanager
from sqlalchemy import text
from app.config import settings
from app.database.connection import close_db, engine
from app.controllers.client.dashboard_controller import router as client_dashboard_router
from app.controllers.client.contact_controller import router as client_contact_router
from app.controllers.client.rating_controller import router as client_rating_router
import logging
import time

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all incoming requests"""
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        client_ip = request.client.host if request.client else "unknown"

        logger.info(f"Request: {request.method} {request.url.path} from {client_ip}")
        if request.url.query:
            logger.debug(f"Query: {request.url.query}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(f"Response: {response.status_code} for {request.method} {request.url.path} ({process_time:.3f}s)")

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Test database connection on startup (non-blocking - don't fail startup)
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database connection successful")
    except Exception as e:
        logger.warning(f"Database connection failed on startup: {str(e)}")
        logger.warning("App will continue, but database-dependent features may not work")

    if not settings.contact_notification_email_list:
        logger.warning("CONTACT_NOTIFICATION_EMAILS is empty, contact requests will not be emailed")

    yield

    # Cleanup on shutdown
    try:
        await close_db()
        logger.info("Database connections closed")
    except Exception as e:
        logger.error(f"Error closing database: {str(e)}")


app = FastAPI(
    title="HomLet API",
    description="Client dashboard, agent contact and agent rating for the HomLet marketplace",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(RequestLoggingMiddleware)

# Login state lives in a signed session cookie
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    max_age=settings.SESSION_MAX_AGE,
    same_site="lax",
    https_only=settings.ENVIRONMENT == "production",
)

app.include_router(client_dashboard_router)
app.include_router(client_contact_router)
app.include_router(client_rating_router)


@app.get("/")
async def root():
    return {"message": "HomLet API", "status": "running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
