from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.database import Base, engine
from app.config import settings
from app.utils.logging import get_logger

# Import models so SQLAlchemy registers tables
from app.models import (
    user,
    post,
    follower,
    block,
)

# Routers
from app.routers import (
    profile_router,
    blocks_router,
)

logger = get_logger("app")

# -----------------------
# CREATE APP
# -----------------------
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Profile pages and block management for the social network.",
    version="1.0.0",
)
logger.info("DATABASE URL: %s", settings.DATABASE_URL)

# -----------------------
# CORS
# -----------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],   # allow all during development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -----------------------
# DATABASE TABLES
# -----------------------
Base.metadata.create_all(bind=engine)

# -----------------------
# ROUTES
# -----------------------
app.include_router(profile_router.router)
app.include_router(profile_router.api_router)
app.include_router(blocks_router.router)


# -----------------------
# NOT FOUND PAGE
# -----------------------
@app.exception_handler(StarletteHTTPException)
async def html_not_found_handler(request: Request, exc: StarletteHTTPException):
    # Profile pages are HTML; everything else keeps FastAPI's JSON errors
    if exc.status_code == 404 and request.url.path.startswith(profile_router.router.prefix + "/"):
        return profile_router.templates.TemplateResponse(
            request,
            "not_found.html",
            {},
            status_code=404,
        )
    return await http_exception_handler(request, exc)


# -----------------------
# HEALTH CHECK
# -----------------------
@app.get("/")
def root():
    return {"message": "Social profile API is running!"}
