"""
Client-side routes and the Streamlit page script that serves each one.
"""

HOME_PAGE = "app.py"

# (pattern, page script)
ROUTES = (
    ("/", HOME_PAGE),
    ("/patients", "pages/p_list.py"),
    ("/patients/add", "pages/p_form.py"),
    ("/patients/edit/:id", "pages/p_form.py"),
    ("/patients/view/:id", "pages/p_view.py"),
    ("/doctors", "pages/d_list.py"),
    ("/doctors/add", "pages/d_form.py"),
    ("/doctors/edit/:id", "pages/d_form.py"),
    ("/doctors/view/:id", "pages/d_view.py"),
)


def _split(path: str) -> list[str]:
    return [p for p in (path or "").strip().split("/") if p]


def match(pattern: str, path: str) -> dict | None:
    """Return the captured params when `path` matches `pattern`, else None."""
    want, got = _split(pattern), _split(path)
    if len(want) != len(got):
        return None
    params = {}
    for w, g in zip(want, got):
        if w.startswith(":"):
            params[w[1:]] = g
        elif w != g:
            return None
    return params


def resolve(path: str) -> tuple[str, dict] | None:
    """Map a path to (page script, params)."""
    for pattern, page in ROUTES:
        params = match(pattern, path)
        if params is not None:
            return page, params
    return None


def routes_for_page(page: str) -> list[str]:
    return [pattern for pattern, p in ROUTES if p == page]


def build(pattern: str, params: dict | None = None) -> str:
    parts = []
    for segment in _split(pattern):
        if segment.startswith(":"):
            parts.append(str((params or {})[segment[1:]]))
        else:
            parts.append(segment)
    return "/" + "/".join(parts)
