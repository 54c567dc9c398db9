from .api_client import ApiClient, ResourceApi
from .errors import ApiError

# Screen controllers are imported from services.screen_service directly.

__all__ = ["ApiClient", "ResourceApi", "ApiError"]
