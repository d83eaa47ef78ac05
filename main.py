import logging
import uvicorn
from fastapi import FastAPI, responses
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import IntegrityError, DBAPIError
from api.v1.router import contact
from core.setup import DatabaseSetup
import handler as hlp
from config.setting import settings
from error import ServerError, ResourceNotFoundError
from util.logger import setup_logging

logger = logging.getLogger(__name__)


def create_app(database: DatabaseSetup = None) -> FastAPI:
    """Build the API around an explicit database handle"""
    setup_logging()
    database = database or DatabaseSetup(settings.DATABASE_URL)
    database.create_tables()

    app = FastAPI(
        title="Contact API", version="1.0.0", description="Portfolio contact form backend"
    )
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URI],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, hlp.validation_error_handler)
    app.add_exception_handler(RequestValidationError, hlp.validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, hlp.validation_http_exceptions_handler)
    app.add_exception_handler(IntegrityError, hlp.db_error_handler)
    app.add_exception_handler(DBAPIError, hlp.db_error_handler)
    app.add_exception_handler(ResourceNotFoundError, hlp.not_found_handler)
    app.add_exception_handler(ServerError, hlp.server_error_handler)

    app.include_router(contact, prefix=settings.API_PREFIX)

    @app.get("/", include_in_schema=False)
    def redirect_to_docs():
        return responses.RedirectResponse("/docs")

    logger.info(f"Contact API ready on {database.database_url.split('@')[-1]}")
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
