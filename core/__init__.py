from .config import Settings, load_settings
from .log_utils import configure_logging
from .session_manager import init_session_state, get_client, mount_screen, navigate

__all__ = [
    "Settings",
    "load_settings",
    "configure_logging",
    "init_session_state",
    "get_client",
    "mount_screen",
    "navigate",
]
