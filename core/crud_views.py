"""
Generic Streamlit screens for one entity type: list, form and detail.

Each page script calls one of these with an entity descriptor; the screen
controller does the talking to the API and these functions only render it.
"""

from datetime import date

import streamlit as st

from core.helpers import render_delete_confirmation
from core.session_manager import current_route, get_client, mount_screen, navigate
from models.entity import DATE, NUMBER, SELECT, TEXTAREA
from models.record import cell_value, display_value, get_value, parse_date, record_id
from services.screen_service import DetailController, FormController, ListController

MIN_DATE = date(1900, 1, 1)
MAX_DATE = date(2100, 12, 31)


def _api(descriptor):
    return get_client().resource(descriptor.resource)


def _back_button(descriptor, key: str):
    if st.button(f"Back to {descriptor.title} List", key=key):
        navigate(descriptor.list_route)


# ----------------------------------------------
# LIST
# ----------------------------------------------
def render_list_screen(descriptor, page: str):
    path, _ = current_route(page)
    screen = mount_screen(path, lambda: ListController(descriptor, _api(descriptor)))
    name = descriptor.name

    head_l, head_r = st.columns([4, 1])
    with head_l:
        st.title(f"{descriptor.title} Management")
    with head_r:
        if st.button(f"Add New {descriptor.title}", key=f"{name}_add", use_container_width=True):
            navigate(descriptor.add_route)

    q_col, b_col = st.columns([5, 1])
    with q_col:
        query = st.text_input(
            "Search",
            key=f"{name}_search",
            placeholder=descriptor.search_placeholder,
            label_visibility="collapsed",
        )
    with b_col:
        if st.button("Search", key=f"{name}_search_btn", use_container_width=True):
            with st.spinner("Loading..."):
                screen.search(query)

    if render_delete_confirmation(screen, descriptor, name):
        with st.spinner("Deleting..."):
            screen.confirm_delete()

    if screen.action_error:
        st.error(screen.action_error)

    if screen.loading:
        st.info("Loading...")
    elif screen.error:
        st.error(screen.error)
    elif not screen.records:
        st.info(f"No {descriptor.plural} found")
    else:
        _render_table(screen, descriptor)


def _render_table(screen, descriptor):
    name = descriptor.name
    widths = [2] * len(descriptor.columns) + [3]

    header = st.columns(widths)
    for col, column in zip(header, descriptor.columns):
        col.markdown(f"**{column.label}**")
    header[-1].markdown("**Actions**")

    for i, record in enumerate(screen.records):
        rid = record_id(descriptor, record)
        row = st.columns(widths)
        for col, column in zip(row, descriptor.columns):
            col.write(cell_value(column, record))

        with row[-1]:
            a, b, c = st.columns(3)
            if a.button("View", key=f"{name}_view_{i}", disabled=rid is None):
                navigate(descriptor.view_route(rid))
            if b.button("Edit", key=f"{name}_edit_{i}", disabled=rid is None):
                navigate(descriptor.edit_route(rid))
            c.button(
                "Delete",
                key=f"{name}_delete_{i}",
                disabled=rid is None,
                on_click=screen.request_delete,
                args=(rid,),
            )


# ----------------------------------------------
# FORM
# ----------------------------------------------
def _widget_key(screen, field) -> str:
    # Version changes whenever values are replaced, forcing fresh widgets
    return f"{screen.descriptor.name}_form_{screen.version}_{field.path}"


def _as_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _from_widget(field, raw):
    if field.kind == NUMBER:
        return "" if raw is None else int(raw)
    if field.kind == DATE:
        return "" if raw is None else raw.isoformat()
    return raw


def _on_change(screen, field, key):
    screen.change(field.path, _from_widget(field, st.session_state[key]))


def _render_input(screen, field):
    key = _widget_key(screen, field)
    label = f"{field.label} *" if field.required else field.label
    value = get_value(screen.values, field.path)
    common = dict(key=key, on_change=_on_change, args=(screen, field, key))

    if field.kind == NUMBER:
        st.number_input(label, value=_as_int(value), step=1, **common)
    elif field.kind == SELECT:
        options = ("",) + tuple(field.options)
        if value not in options:
            options += (value,)
        st.selectbox(
            label,
            options,
            index=options.index(value),
            format_func=lambda o: o or field.placeholder,
            **common,
        )
    elif field.kind == TEXTAREA:
        st.text_area(label, value=str(value), height=120, **common)
    elif field.kind == DATE:
        st.date_input(
            label,
            value=parse_date(value),
            min_value=MIN_DATE,
            max_value=MAX_DATE,
            format="YYYY-MM-DD",
            **common,
        )
    else:
        st.text_input(label, value=str(value), placeholder=field.placeholder, **common)


def render_form_screen(descriptor, page: str):
    path, params = current_route(page)
    rid = params.get("id")
    screen = mount_screen(path, lambda: FormController(descriptor, _api(descriptor), rid))
    name, title = descriptor.name, descriptor.title

    st.title(f"Update {title}" if screen.is_edit else f"Add New {title}")

    if screen.loading and screen.is_edit:
        st.info("Loading...")
        return

    if screen.error:
        st.error(screen.error)
    if screen.notice:
        st.success(screen.notice)

    grid = [f for f in descriptor.fields if f.kind != TEXTAREA]
    wide = [f for f in descriptor.fields if f.kind == TEXTAREA]

    cols = st.columns(2)
    for i, field in enumerate(grid):
        with cols[i % 2]:
            _render_input(screen, field)
    for field in wide:
        _render_input(screen, field)

    c1, c2, _ = st.columns([1, 1, 4])
    with c1:
        if st.button("Cancel", key=f"{name}_form_cancel", use_container_width=True):
            navigate(descriptor.list_route)
    with c2:
        slot = st.empty()
        label = f"Update {title}" if screen.is_edit else f"Add {title}"
        if slot.button(label, key=f"{name}_form_submit", type="primary", use_container_width=True):
            slot.button("Saving...", key=f"{name}_form_saving", disabled=True, use_container_width=True)
            target = screen.submit()
            if target:
                navigate(target)
            st.rerun()


# ----------------------------------------------
# DETAIL
# ----------------------------------------------
def _render_section(descriptor, section, record):
    st.subheader(section.title)
    for path in section.paths:
        field = descriptor.field(path)
        value = display_value(field, record)
        if field.kind == TEXTAREA:
            st.markdown(f"**{field.label}:**")
            st.text(value)
        else:
            st.markdown(f"**{field.label}:** {value}")


def render_detail_screen(descriptor, page: str):
    path, params = current_route(page)
    rid = params.get("id")
    name, title = descriptor.name, descriptor.title

    if not rid:
        st.error(f"No {name} selected. Please go back to the {name} list.")
        _back_button(descriptor, f"{name}_detail_back_none")
        return

    screen = mount_screen(path, lambda: DetailController(descriptor, _api(descriptor), rid))

    if screen.loading:
        st.info("Loading...")
        return
    if screen.error:
        st.error(screen.error)
        _back_button(descriptor, f"{name}_detail_back_error")
        return
    if screen.not_found:
        st.info(f"{title} not found")
        _back_button(descriptor, f"{name}_detail_back_missing")
        return

    head_l, head_r = st.columns([3, 2])
    with head_l:
        st.title(f"{title} Information")
    with head_r:
        e, d, b = st.columns(3)
        if e.button("Edit", key=f"{name}_detail_edit", use_container_width=True):
            navigate(descriptor.edit_route(rid))
        d.button(
            "Delete",
            key=f"{name}_detail_delete",
            use_container_width=True,
            on_click=screen.request_delete,
            args=(rid,),
        )
        if b.button("Back", key=f"{name}_detail_back", use_container_width=True):
            navigate(descriptor.list_route)

    if render_delete_confirmation(screen, descriptor, f"{name}_detail"):
        with st.spinner("Deleting..."):
            target = screen.confirm_delete()
        if target:
            navigate(target)

    if screen.action_error:
        st.error(screen.action_error)

    record = screen.record
    paired = [s for s in descriptor.sections if not s.wide]
    wide = [s for s in descriptor.sections if s.wide]

    cols = st.columns(2)
    for i, section in enumerate(paired):
        with cols[i % 2]:
            _render_section(descriptor, section, record)
    for section in wide:
        st.write("---")
        _render_section(descriptor, section, record)
