import streamlit as st

from core.session_manager import get_settings, init_session_state, navigate

APP_TITLE = "Hospital Management System"


# -----------------------------
# Page chrome
# -----------------------------
def hide_default_sidebar_nav():
    """Hide Streamlit's default multi-page navigation.

    Pages need a route (and often a record id) to render, so they are only
    reached through the navigation bar and in-page actions.
    """
    st.markdown(
        """
        <style>
        [data-testid="stSidebarNav"] { display: none; }
        [data-testid="stSidebar"] { display: none !important; }
        [data-testid="collapsedControl"] { display: none !important; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def render_navbar():
    """Title linking to the dashboard plus one link per collection."""
    cols = st.columns([6, 1, 1])
    with cols[0]:
        if st.button(APP_TITLE, key="nav_home", type="tertiary"):
            navigate("/")
    with cols[1]:
        if st.button("Patients", key="nav_patients", use_container_width=True):
            navigate("/patients")
    with cols[2]:
        if st.button("Doctors", key="nav_doctors", use_container_width=True):
            navigate("/doctors")
    st.write("---")


def render_layout(page_title: str = APP_TITLE):
    """Shared setup for every page: config, session keys, chrome."""
    st.set_page_config(
        page_title=page_title,
        page_icon="🏥",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    get_settings()
    init_session_state()
    hide_default_sidebar_nav()
    render_navbar()


def render_delete_confirmation(screen, descriptor, key_prefix: str):
    """Inline confirm/cancel prompt for a pending delete.

    Returns True when the user confirmed during this run.
    """
    if screen.pending_delete is None:
        return False

    st.warning(f"Are you sure you want to delete this {descriptor.name}?")
    c1, c2, _ = st.columns([1, 1, 4])
    with c1:
        confirmed = st.button("Yes, delete", key=f"{key_prefix}_confirm_delete", type="primary")
    with c2:
        st.button("Cancel", key=f"{key_prefix}_cancel_delete", on_click=screen.cancel_delete)
    return confirmed
