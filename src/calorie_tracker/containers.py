"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from calorie_tracker.adapters.openai_recognition_client import (
    OpenAIRecognitionClient,
)
from calorie_tracker.adapters.supabase_auth_gateway import SupabaseAuthGateway
from calorie_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from calorie_tracker.adapters.supabase_goals_repository import SupabaseGoalsRepository
from calorie_tracker.adapters.supabase_image_storage import SupabaseImageStorage
from calorie_tracker.config import Settings
from calorie_tracker.services.auth import AuthService
from calorie_tracker.services.entries import EntryService
from calorie_tracker.services.goals import GoalsService
from calorie_tracker.services.images import ImageUploadService
from calorie_tracker.services.recognition import FoodRecognitionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recognition_service: FoodRecognitionService
    auth_service: AuthService
    entry_service: EntryService
    goals_service: GoalsService
    image_service: ImageUploadService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    openai_client = (
        OpenAIRecognitionClient.create(resolved_settings.openai_api_key)
        if resolved_settings.openai_configured
        else None
    )
    recognition_service = FoodRecognitionService(
        client=openai_client,
        model=resolved_settings.openai_model,
        max_tokens=resolved_settings.openai_max_tokens,
        temperature=resolved_settings.openai_temperature,
    )
    goals_service = GoalsService(SupabaseGoalsRepository(supabase_client))
    entry_service = EntryService(
        repository=SupabaseEntryRepository(supabase_client),
        goals_service=goals_service,
    )
    auth_service = AuthService(SupabaseAuthGateway(supabase_client))
    image_service = ImageUploadService(
        storage=SupabaseImageStorage(supabase_client, resolved_settings.image_bucket),
        max_bytes=resolved_settings.max_image_mb * 1024 * 1024,
    )

    async def close_resources() -> None:
        if openai_client is not None:
            await openai_client.client.close()

    return AppContainer(
        settings=resolved_settings,
        recognition_service=recognition_service,
        auth_service=auth_service,
        entry_service=entry_service,
        goals_service=goals_service,
        image_service=image_service,
        close_resources=close_resources,
    )
