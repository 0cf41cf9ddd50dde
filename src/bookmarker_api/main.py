import logging

from fastapi import FastAPI

from bookmarker_api.api.routes.books import router as books_router
from bookmarker_api.api.routes.ratings import router as ratings_router
from bookmarker_api.api.routes.reviews import router as reviews_router
from bookmarker_api.api.routes.saved_books import router as saved_books_router
from bookmarker_api.api.routes.users import router as users_router
from bookmarker_api.config import settings
from bookmarker_api.error_handlers import register_error_handlers
from bookmarker_api.logging_config import configure_logging
from bookmarker_api.middleware import RequestContextMiddleware

configure_logging(
    level=settings.log_level,
    output_format=settings.log_format,
    service_name=settings.log_service_name,
)
logger = logging.getLogger(__name__)
logger.info("Application bootstrapped")

app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version=settings.app_version,
)
app.add_middleware(RequestContextMiddleware)
register_error_handlers(app)

app.include_router(users_router)
app.include_router(books_router)
app.include_router(saved_books_router)
app.include_router(reviews_router)
app.include_router(ratings_router)
