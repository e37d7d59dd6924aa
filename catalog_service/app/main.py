from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from catalog_service.app.config import CREATE_TABLES
from catalog_service.app.database import create_tables, wait_for_db
from catalog_service.app.exceptions import NotFound, StoreFailure, ValidationFailure
from catalog_service.app.logger import logger
from catalog_service.app.routes import categories, products
from catalog_service.app.validators import errors_by_field

INVALID_DATA = "The given data was invalid."


async def validation_failure_handler(request: Request, exc: ValidationFailure):
    return JSONResponse(status_code=422, content={"message": INVALID_DATA, "errors": exc.errors})

async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = errors_by_field(exc.errors())
    logger.warning("Некорректный запрос", extra={"path": request.url.path, "errors": errors})
    return JSONResponse(status_code=422, content={"message": INVALID_DATA, "errors": errors})

async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"message": exc.message})

async def store_failure_handler(request: Request, exc: StoreFailure):
    return JSONResponse(status_code=500, content={"message": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(title="Catalog Service")

    @app.on_event("startup")
    async def startup():
        logger.info("Catalog Service startup")
        app.state.db = await wait_for_db()
        if CREATE_TABLES:
            await create_tables()

    @app.on_event("shutdown")
    async def shutdown():
        logger.info("Catalog Service shutdown")

    Instrumentator().instrument(app).expose(app)

    app.add_exception_handler(ValidationFailure, validation_failure_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(StoreFailure, store_failure_handler)

    app.include_router(products.router)
    app.include_router(categories.router)
    return app

app = create_app()
