"""FastAPI application factory."""

from fastapi import FastAPI

from fitness_tracker.api.dashboard import router as dashboard_router
from fitness_tracker.api.errors import register_error_handlers
from fitness_tracker.api.exercises import router as exercises_router
from fitness_tracker.api.food import router as food_router
from fitness_tracker.api.profile import router as profile_router
from fitness_tracker.api.routines import router as routines_router
from fitness_tracker.api.workouts import router as workouts_router
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    app = FastAPI(title="Fitness Tracker")
    app.state.container = container
    register_error_handlers(app, container.settings.environment)

    app.include_router(dashboard_router)
    app.include_router(workouts_router)
    app.include_router(routines_router)
    app.include_router(exercises_router)
    app.include_router(food_router)
    app.include_router(profile_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
