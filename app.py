import streamlit as st

from core.helpers import render_layout
from core.routes import HOME_PAGE
from core.session_manager import current_route, get_client, mount_screen, navigate
from models import DOCTOR, PATIENT
from services.screen_service import DashboardController


def render_dashboard():
    path, _ = current_route(HOME_PAGE)
    screen = mount_screen(path or "/", lambda: DashboardController(get_client(), (PATIENT, DOCTOR)))

    if screen.loading:
        st.info("Loading dashboard data...")
        return

    if screen.error:
        st.error(screen.error)
        return

    st.title("Hospital Management Dashboard")

    c1, c2 = st.columns(2)
    with c1:
        st.subheader("Patient Management")
        st.metric("Total Patients", screen.count(PATIENT))
        if st.button("Manage Patients", key="dash_manage_patients"):
            navigate(PATIENT.list_route)
    with c2:
        st.subheader("Doctor Management")
        st.metric("Total Doctors", screen.count(DOCTOR))
        if st.button("Manage Doctors", key="dash_manage_doctors"):
            navigate(DOCTOR.list_route)

    st.write("---")
    st.subheader("Quick Actions")

    q1, q2 = st.columns(2)
    with q1:
        if st.button("➕ Add New Patient", key="dash_add_patient", use_container_width=True):
            navigate(PATIENT.add_route)
    with q2:
        if st.button("➕ Add New Doctor", key="dash_add_doctor", use_container_width=True):
            navigate(DOCTOR.add_route)


def main():
    render_layout()
    render_dashboard()


if __name__ == "__main__":
    main()
