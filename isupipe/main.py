import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from isupipe import models  # noqa: F401  registers tables on Base.metadata
from isupipe.api.v1.main import api_router
from isupipe.core.config import settings
from isupipe.core.database import Base, engine

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
)

cors_origins = [origin.strip() for origin in settings.CORS_ORIGINS.split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


def _validation_message(errors) -> str:
    for error in errors:
        loc = error.get("loc", ())
        if loc and loc[0] == "body":
            return "failed to decode the request body as json"
    return "bad request"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # malformed body is a plain 400, not FastAPI's default 422
    detail = _validation_message(exc.errors())
    logger.warning(f"Rejected {request.method} {request.url.path}: {detail}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


@app.get("/")
async def read_root():
    return {"message": "isupipe backend is running"}


@app.on_event("startup")
async def on_startup():
    # Alembic owns production schemas; this only fills in missing tables
    Base.metadata.create_all(bind=engine)
    logger.info(f"[Startup] {settings.PROJECT_NAME} serving reactions under {settings.API_PREFIX}")


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
