"""
Per-screen view-state machine: idle -> loading -> {success, error}.

Every fetch captures a generation token from `begin`. `succeed` and `fail`
only apply when that token is still the current generation, so a response
for a superseded request (a newer fetch was issued, or the screen was
unmounted and `invalidate` was called) is dropped.
"""

from dataclasses import dataclass, replace
from typing import Any

IDLE = "idle"
LOADING = "loading"
SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    status: str = IDLE
    data: Any = None
    error: str | None = None
    generation: int = 0

    @property
    def loading(self) -> bool:
        return self.status == LOADING


def begin(state: ViewState) -> tuple[ViewState, int]:
    # Previous data stays visible until the new result (or error) arrives
    token = state.generation + 1
    return replace(state, status=LOADING, generation=token), token


def is_current(state: ViewState, token: int) -> bool:
    return state.generation == token


def succeed(state: ViewState, token: int, data) -> ViewState:
    if not is_current(state, token):
        return state
    return ViewState(status=SUCCESS, data=data, error=None, generation=token)


def fail(state: ViewState, token: int, message: str) -> ViewState:
    if not is_current(state, token):
        return state
    return ViewState(status=ERROR, data=None, error=message, generation=token)


def invalidate(state: ViewState) -> ViewState:
    """Supersede whatever is in flight without touching what is shown."""
    status = IDLE if state.status == LOADING else state.status
    return replace(state, status=status, generation=state.generation + 1)
