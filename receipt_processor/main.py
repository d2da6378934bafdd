from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from .config import settings
from .database import init_db
from .errors import ReceiptNotFound
from .error_handlers import (
    receipt_not_found_handler, validation_exception_handler, generic_exception_handler,
)
from .routes.receipts import router as receipts_router
from .utils.logging import logger

@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        init_db()
    logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)
    yield

app = FastAPI(title=settings.APP_NAME,
              description="Scores purchase receipts and serves the points back by id",
    version="0.1.0",
    docs_url="/docs",          # Swagger UI
    redoc_url="/redoc",        # ReDoc
    openapi_url="/openapi.json",
    lifespan=lifespan)

app.add_exception_handler(ReceiptNotFound, receipt_not_found_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(receipts_router)

@app.get("/health")
def health():
    return {"ok": True}
