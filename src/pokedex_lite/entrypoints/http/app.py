from fastapi import FastAPI

from pokedex_lite.entrypoints.http.exception_handlers import register_exception_handlers
from pokedex_lite.entrypoints.http.routes.health import router as health_router
from pokedex_lite.entrypoints.http.routes.pokemon import router as pokemon_router
from pokedex_lite.entrypoints.http.routes.types import router as types_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Pokedex Lite API",
        description="""
        Pokédex API aggregating records from PokéAPI into display-ready pokemon.

        ## Features
        - Paginated pokemon listing
        - Search by exact name/id with substring fallback
        - Pokemon details (species enrichment when available)
        - Paginated listing by type

        ## Caching
        None. Every request is served from fresh upstream calls.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "MIT",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(pokemon_router, prefix="/v1")
    app.include_router(types_router, prefix="/v1")

    return app


app = build_app()
