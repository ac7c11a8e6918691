from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logging
from .config import settings
from .exceptions import InvalidArgument
from .routers import outages
from .middleware import actor_middleware, logging_middleware

# Setup basic logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s %(levelname)s %(name)s %(message)s',
)

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

# Middleware runs in reverse order of registration
# 1. Logging (inner - sees the acting user)
app.middleware("http")(logging_middleware)

# 2. Acting user (outermost - must be set before anything else runs)
app.middleware("http")(actor_middleware)

app.include_router(outages.router, prefix="/outages", tags=["Outages"])


@app.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument):
    logger.warning(f"⚠️ Invalid argument on {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.get("/")
def root():
    return {"message": f"{settings.PROJECT_NAME} running"}
