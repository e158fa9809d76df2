from fastapi import FastAPI

from autolot.entrypoints.http.exception_handlers import register_exception_handlers
from autolot.entrypoints.http.routes.admin import router as admin_router
from autolot.entrypoints.http.routes.cars import router as cars_router
from autolot.entrypoints.http.routes.health import router as health_router
from autolot.entrypoints.http.routes.saved_cars import router as saved_cars_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Autolot API",
        description="""
        Car dealership marketplace API: public catalog, wishlist and admin area.

        ## Features
        - Search the car catalog with filters, sorting and pagination
        - Save cars to a wishlist
        - Car details with test drive context
        - Admin dashboard and test drive booking management

        ## Authentication
        `Authorization: Bearer <identity provider subject id>`.
        Catalog endpoints accept anonymous callers; wishlist endpoints require
        a known user; admin endpoints require the ADMIN role.

        ## Responses
        Every response uses the envelope `{success, data, error}`.
        Failures add an error `code` and, for validation errors, `errors`.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        contact={
            "name": "Autolot Team",
            "email": "dev@autolot.example",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")
    app.include_router(saved_cars_router, prefix="/v1")
    app.include_router(admin_router, prefix="/v1")

    return app


app = build_app()
