import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import settings
from .database import engine, SessionLocal
from .models import Base
from .api import auth, employees, trips, bookings
from .core.errors import register_exception_handlers
from .core.permissions import authenticate_request
from .services import account_service

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    Base.metadata.create_all(bind=engine)
    if settings.seed_default_accounts:
        db = SessionLocal()
        try:
            created = account_service.ensure_default_accounts(db)
            if created:
                logger.info("Created %d default accounts", created)
        finally:
            db.close()
    yield


app = FastAPI(
    title=settings.app_name,
    description="Employees, trips and bookings with JWT authentication",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
    # every request goes through the bearer-token check once
    dependencies=[Depends(authenticate_request)],
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(auth.router)
app.include_router(employees.router)
app.include_router(trips.router)
app.include_router(bookings.router)


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}
