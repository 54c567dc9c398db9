import streamlit as st

from core import routes
from core.config import load_settings
from core.log_utils import configure_logging
from services.api_client import ApiClient


@st.cache_resource
def get_settings():
    """Read configuration once per process."""
    settings = load_settings()
    configure_logging(settings.log_level)
    return settings


def init_session_state():
    """Ensure required session keys exist."""
    if "route" not in st.session_state:
        st.session_state.route = "/"
    if "screen" not in st.session_state:
        st.session_state.screen = None
    if "screen_route" not in st.session_state:
        st.session_state.screen_route = None


def get_client() -> ApiClient:
    """Per-session API client bound to the configured base address."""
    if "api_client" not in st.session_state:
        st.session_state.api_client = ApiClient(get_settings().api_url)
    return st.session_state.api_client


def current_route(page: str):
    """Return (path, params) for the page being rendered.

    Uses the route recorded by navigate() when it belongs to this page.
    Otherwise (sidebar, reload, shared link) falls back to the page's own
    route, taking the record id from ?id=. Returns (None, {}) when the page
    needs an id and none was given.
    """
    init_session_state()

    resolved = routes.resolve(st.session_state.route)
    if resolved and resolved[0] == page:
        path, params = st.session_state.route, resolved[1]
    else:
        record_id = st.query_params.get("id")
        path, params = None, {}
        for pattern in routes.routes_for_page(page):
            if (":id" in pattern) == bool(record_id):
                path = routes.build(pattern, {"id": record_id})
                params = routes.match(pattern, path)
                break
        if path is None:
            return None, {}
        st.session_state.route = path

    # Keep the address bar shareable
    if "id" in params:
        if st.query_params.get("id") != params["id"]:
            st.query_params["id"] = params["id"]
    elif "id" in st.query_params:
        del st.query_params["id"]

    return path, params


def mount_screen(path: str, factory):
    """Return the controller mounted for `path`, mounting a fresh one if needed.

    A different path unmounts the previous controller first, so anything it
    still has in flight is discarded when it returns.
    """
    init_session_state()

    screen = st.session_state.screen
    if screen is not None and st.session_state.screen_route == path:
        return screen

    unmount_screen()
    screen = factory()
    st.session_state.screen = screen
    st.session_state.screen_route = path
    with st.spinner("Loading..."):
        screen.mount()
    return screen


def unmount_screen():
    screen = st.session_state.get("screen")
    if screen is not None:
        screen.unmount()
    st.session_state.screen = None
    st.session_state.screen_route = None


def navigate(path: str):
    """Leave the current screen and switch to the page serving `path`."""
    resolved = routes.resolve(path)
    if resolved is None:
        raise ValueError(f"Unknown route: {path}")

    page, _ = resolved
    unmount_screen()
    st.session_state.route = path
    st.switch_page(page)
