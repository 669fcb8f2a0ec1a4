# RecipeVault API Main Entry Point
import logging
import sys
import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from .settings import settings
from .errors import RecipeError, InvalidURL, ServerError, InvalidResponse, ParsingError
from .routers.ready import router as ready_router
from .routers.recipes import router as recipes_router

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("recipevault")

# Rate limiter (per-IP)
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])

app = FastAPI(title="RecipeVault API", version="0.1.0")
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = {
    InvalidURL: 400,
    ParsingError: 422,
    InvalidResponse: 502,
    ServerError: 502,
}


@app.exception_handler(RecipeError)
async def recipe_error_handler(request: Request, exc: RecipeError):
    status = ERROR_STATUS.get(type(exc), 500)
    logger.warning(f"{request.url.path} failed: {exc.__class__.__name__}: {exc}")
    return JSONResponse(status_code=status, content={"detail": exc.message})


@app.exception_handler(httpx.HTTPError)
async def upstream_error_handler(request: Request, exc: httpx.HTTPError):
    logger.warning(f"{request.url.path} upstream request failed: {exc}")
    return JSONResponse(status_code=504, content={"detail": "Upstream request failed"})


app.include_router(ready_router, prefix="/api", tags=["ready"])
app.include_router(recipes_router, prefix="/api", tags=["recipes"])
