"""
FastAPI app assembly: logging, middleware, error handlers and router wiring.
"""
import logging
import os
from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from model_repository.api.errors import ApiErrorMessage, error_response
from model_repository.api.systems import router as systems_router
from model_repository.api.vendors import router as vendors_router
from model_repository.api.asset_categories import router as asset_categories_router
from model_repository.db.database import init_schema, schema_autocreate_enabled

SERVICE_NAME = "model-repository-service"

tags_metadata = [
    {"name": "System", "description": "Systems with a physical or virtual location, owned by an organization."},
    {"name": "Vendor", "description": "Vendors supplying the catalogued systems and assets."},
    {"name": "Asset Category", "description": "Categories used to classify assets."},
]

# Alembic owns the schema outside of SQLite development/test databases
if schema_autocreate_enabled():
    init_schema()

app = FastAPI(
    title="Model Repository Service",
    description="API for storing and retrieving Systems, Vendors and Asset Categories.",
    version="1.0.0",
    openapi_tags=tags_metadata,
)

_DEFAULT_ORIGINS = "http://localhost,http://localhost:3000,http://localhost:8000"
origins = [o.strip() for o in os.getenv("CORS_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    # Query/path parameters of the wrong type are reported by name; anything else is an unreadable body
    for error in exc.errors():
        loc = error.get("loc") or ()
        if loc and loc[0] in ("query", "path"):
            code = ApiErrorMessage.ERRONEOUS_PARAMETER_TYPE
            logger.info("rejected parameter: path=%s param=%s", request.url.path, loc[-1])
            return error_response(status.HTTP_400_BAD_REQUEST, code.value, f"{code.name}-> {loc[-1]}")
    code = ApiErrorMessage.HTTP_MESSAGE_NOT_READABLE
    logger.info("rejected request body: path=%s errors=%s", request.url.path, len(exc.errors()))
    return error_response(status.HTTP_400_BAD_REQUEST, code.value, code.name)


app.include_router(systems_router)
app.include_router(vendors_router)
app.include_router(asset_categories_router)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": SERVICE_NAME}
