"""Supabase storage bucket for meal photos."""

from dataclasses import dataclass

from supabase import Client

from calorie_tracker.services.images import ImageStorage


@dataclass
class SupabaseImageStorage(ImageStorage):
    """Supabase implementation for storing meal photos."""

    client: Client
    bucket: str = "food-images"

    def upload(self, path: str, content: bytes, content_type: str) -> None:
        """Upload a photo to the bucket."""
        self.client.storage.from_(self.bucket).upload(
            path, content, {"content-type": content_type}
        )

    def public_url(self, path: str) -> str:
        """Return the public URL for a stored photo."""
        return self.client.storage.from_(self.bucket).get_public_url(path)
