import pytest

from core import routes
from models import DOCTOR, PATIENT


@pytest.mark.parametrize(
    "path, page, params",
    [
        ("/", "app.py", {}),
        ("/patients", "pages/p_list.py", {}),
        ("/patients/add", "pages/p_form.py", {}),
        ("/patients/edit/p1", "pages/p_form.py", {"id": "p1"}),
        ("/patients/view/p1", "pages/p_view.py", {"id": "p1"}),
        ("/doctors", "pages/d_list.py", {}),
        ("/doctors/add", "pages/d_form.py", {}),
        ("/doctors/edit/123", "pages/d_form.py", {"id": "123"}),
        ("/doctors/view/123", "pages/d_view.py", {"id": "123"}),
    ],
)
def test_resolve(path, page, params):
    assert routes.resolve(path) == (page, params)


def test_unknown_paths_do_not_resolve():
    assert routes.resolve("/nurses") is None
    assert routes.resolve("/patients/view") is None
    assert routes.resolve("/patients/view/1/extra") is None


def test_literal_segment_wins_over_parameter():
    # "add" must not be taken as an id
    assert routes.resolve("/doctors/add") == ("pages/d_form.py", {})


def test_descriptor_routes_resolve_to_their_pages():
    assert routes.resolve(PATIENT.edit_route("p9"))[0] == "pages/p_form.py"
    assert routes.resolve(DOCTOR.view_route("d9")) == ("pages/d_view.py", {"id": "d9"})
    assert routes.resolve(DOCTOR.list_route)[0] == "pages/d_list.py"


def test_build_fills_parameters():
    assert routes.build("/patients/edit/:id", {"id": "42"}) == "/patients/edit/42"
    assert routes.build("/doctors") == "/doctors"


def test_routes_for_page():
    assert routes.routes_for_page("pages/p_form.py") == ["/patients/add", "/patients/edit/:id"]
