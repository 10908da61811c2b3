"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.supabase_auth_client import SupabaseAuthClient
from fitness_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from fitness_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from fitness_tracker.adapters.supabase_stats_repository import SupabaseStatsRepository
from fitness_tracker.adapters.supabase_workout_repository import (
    SupabaseWorkoutRepository,
)
from fitness_tracker.config import Settings
from fitness_tracker.services.auth import AuthService
from fitness_tracker.services.food import FoodService
from fitness_tracker.services.routines import RoutineService
from fitness_tracker.services.sessions import SessionService
from fitness_tracker.services.stats import StatsService
from fitness_tracker.services.timer_store import InMemoryTimerStore
from fitness_tracker.services.users import UserService
from fitness_tracker.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    user_service: UserService
    workout_service: WorkoutService
    routine_service: RoutineService
    session_service: SessionService
    food_service: FoodService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    workout_repository = SupabaseWorkoutRepository(supabase_client)
    auth_service = AuthService(
        client=SupabaseAuthClient(supabase_client),
        password_min_length=resolved_settings.password_min_length,
    )
    session_service = SessionService(
        repository=workout_repository,
        store=InMemoryTimerStore(ttl_seconds=resolved_settings.session_ttl_seconds),
    )
    stats_service = StatsService(
        SupabaseStatsRepository(supabase_client),
        window_days=resolved_settings.recent_window_days,
        recent_limit=resolved_settings.recent_workouts_limit,
    )
    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        user_service=UserService(SupabaseProfileRepository(supabase_client)),
        workout_service=WorkoutService(workout_repository),
        routine_service=RoutineService(workout_repository),
        session_service=session_service,
        food_service=FoodService(SupabaseFoodRepository(supabase_client)),
        stats_service=stats_service,
    )
