import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from heartkemy.core.config import settings
from heartkemy.core.errors import HeartKemyError
from heartkemy.routers import analysis, emotions, letters, posts, users

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.project_name,
    version="1.0.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HeartKemyError)
async def heartkemy_error_handler(request: Request, exc: HeartKemyError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.message})


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    """Store failures not already wrapped by a service. The cause is only logged."""
    logger.error(f"{request.method} {request.url.path} storage failure", exc_info=exc)
    return JSONResponse(status_code=500, content={"success": False, "error": "Internal storage error"})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing fields are a 400 with the same envelope as every other error."""
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    message = "Missing or invalid fields"
    if fields:
        message = f"{message}: {', '.join(fields)}"
    return JSONResponse(status_code=400, content={"success": False, "error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# Include routers
app.include_router(users.router, prefix=settings.api_prefix)
app.include_router(posts.router, prefix=settings.api_prefix)
app.include_router(emotions.router, prefix=settings.api_prefix)
app.include_router(analysis.router, prefix=settings.api_prefix)
app.include_router(letters.router, prefix=settings.api_prefix)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Welcome to HeartKemy API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run("heartkemy.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
