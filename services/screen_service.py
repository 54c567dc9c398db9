"""
Screen controllers for the CRUD pages and the dashboard.

Controllers hold the view-state of one mounted screen and talk to the API.
They know nothing about Streamlit: pages render from controller attributes
and forward user events (search, submit, delete) to controller methods.
A method that wants the page to move elsewhere returns the target route.
"""

import logging
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor, wait

from core import view_state
from core.view_state import ViewState, SUCCESS
from models.entity import EntityDescriptor
from models.record import (
    create_payload, invalid_emails, is_usable, missing_required, set_value,
)
from services.errors import ApiError

logger = logging.getLogger(__name__)


def as_record_list(result) -> list:
    if not isinstance(result, list):
        raise ApiError(f"Expected a list of records, got {type(result).__name__}")
    return result


def as_record(result) -> dict:
    if not is_usable(result):
        raise ApiError("Response did not contain a record")
    return result


class ScreenController(ABC):
    def __init__(self):
        self.state = ViewState()
        self.mounted = False
        # Bumped on unmount; actions issued before then are ignored
        self.epoch = 0
        self.action_error = None

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def error(self):
        return self.state.error

    def mount(self):
        self.mounted = True
        self.refresh()

    def unmount(self):
        self.mounted = False
        self.epoch += 1
        self.state = view_state.invalidate(self.state)

    @abstractmethod
    def refresh(self) -> bool:
        """Fetch the screen's data; return True when the result was applied."""

    def _fetch(self, call, failure_message: str, transform=None) -> bool:
        """Run one fetch; return True when its result was applied."""
        self.action_error = None
        self.state, token = view_state.begin(self.state)
        try:
            result = call()
            if transform is not None:
                result = transform(result)
        except ApiError as e:
            logger.warning("%s: %s", failure_message, e)
            self.state = view_state.fail(self.state, token, failure_message)
            return False

        if not view_state.is_current(self.state, token):
            logger.debug("Discarding superseded response (generation %s)", token)
            return False
        self.state = view_state.succeed(self.state, token, result)
        return True

    def _act(self, call, failure_message: str) -> bool:
        """Run one mutating call; return True when it succeeded for this screen."""
        epoch = self.epoch
        self.action_error = None
        try:
            call()
        except ApiError as e:
            logger.warning("%s: %s", failure_message, e)
            if epoch == self.epoch:
                self.action_error = failure_message
            return False
        return self.mounted and epoch == self.epoch


class DeleteConfirmation:
    """Two-step delete: request, then confirm or cancel."""

    pending_delete = None

    def request_delete(self, record_id: str):
        self.pending_delete = record_id

    def cancel_delete(self):
        self.pending_delete = None


# ------------------------------------------
# List
# ------------------------------------------
class ListController(DeleteConfirmation, ScreenController):
    def __init__(self, descriptor: EntityDescriptor, api):
        super().__init__()
        self.descriptor = descriptor
        self.api = api
        self.query = ""

    @property
    def records(self) -> list:
        return self.state.data or []

    def refresh(self) -> bool:
        return self._fetch(
            self.api.list_all,
            f"Failed to fetch {self.descriptor.plural}",
            as_record_list,
        )

    def search(self, query: str) -> bool:
        self.query = query
        if not (query or "").strip():
            return self.refresh()
        return self._fetch(
            lambda: self.api.search(query),
            f"Failed to search {self.descriptor.plural}",
            as_record_list,
        )

    def confirm_delete(self) -> bool:
        record_id = self.pending_delete
        self.pending_delete = None
        if record_id is None:
            return False
        deleted = self._act(
            lambda: self.api.delete(record_id),
            f"Failed to delete {self.descriptor.name}",
        )
        if deleted:
            self.refresh()
        return deleted


# ------------------------------------------
# Detail
# ------------------------------------------
class DetailController(DeleteConfirmation, ScreenController):
    def __init__(self, descriptor: EntityDescriptor, api, record_id: str):
        super().__init__()
        self.descriptor = descriptor
        self.api = api
        self.record_id = record_id

    @property
    def record(self):
        return self.state.data

    @property
    def not_found(self) -> bool:
        return self.state.status == SUCCESS and self.state.data is None

    def refresh(self) -> bool:
        return self._fetch(
            lambda: self.api.get(self.record_id),
            f"Failed to fetch {self.descriptor.name} data",
            lambda result: result if is_usable(result) else None,
        )

    def confirm_delete(self) -> str | None:
        if self.pending_delete is None:
            return None
        self.pending_delete = None
        deleted = self._act(
            lambda: self.api.delete(self.record_id),
            f"Failed to delete {self.descriptor.name}",
        )
        return self.descriptor.list_route if deleted else None


# ------------------------------------------
# Form (create and edit)
# ------------------------------------------
class FormController(ScreenController):
    def __init__(self, descriptor: EntityDescriptor, api, record_id: str | None = None):
        super().__init__()
        self.descriptor = descriptor
        self.api = api
        self.record_id = record_id
        self.values = descriptor.blank_record()
        # Bumped whenever values are replaced wholesale so widgets re-seed
        self.version = 0
        self.submit_error = None
        self.notice = None

    @property
    def is_edit(self) -> bool:
        return bool(self.record_id)

    @property
    def error(self):
        return self.submit_error or self.state.error

    def refresh(self) -> bool:
        if not self.is_edit:
            return True
        loaded = self._fetch(
            lambda: self.api.get(self.record_id),
            f"Failed to fetch {self.descriptor.name} data",
            as_record,
        )
        if loaded:
            self.values = self.state.data
            self.version += 1
        return loaded

    def change(self, path: str, value):
        self.values = set_value(self.values, path, value)

    def missing_labels(self) -> list[str]:
        return [f.label for f in missing_required(self.descriptor, self.values)]

    def submit(self) -> str | None:
        """Save the form; return the list route after a successful update."""
        self.notice = None
        self.submit_error = None

        missing = self.missing_labels()
        if missing:
            self.submit_error = "Please fill in the required fields: " + ", ".join(missing)
            return None

        malformed = [f.label for f in invalid_emails(self.descriptor, self.values)]
        if malformed:
            self.submit_error = "Please enter a valid email address: " + ", ".join(malformed)
            return None

        action = "update" if self.is_edit else "create"
        epoch = self.epoch
        try:
            if self.is_edit:
                self.api.update(self.record_id, self.values)
            else:
                self.api.create(create_payload(self.descriptor, self.values))
        except ApiError as e:
            logger.warning("Failed to %s %s: %s", action, self.descriptor.name, e)
            if epoch == self.epoch:
                self.submit_error = f"Failed to {action} {self.descriptor.name}"
            return None

        if not self.mounted or epoch != self.epoch:
            return None
        if self.is_edit:
            return self.descriptor.list_route

        # Stay on the form so another record can be added
        self.values = self.descriptor.blank_record()
        self.version += 1
        self.notice = f"{self.descriptor.title} created."
        return None


# ------------------------------------------
# Dashboard
# ------------------------------------------
class DashboardController(ScreenController):
    def __init__(self, client, descriptors):
        super().__init__()
        self.client = client
        self.descriptors = tuple(descriptors)

    def count(self, descriptor: EntityDescriptor):
        if self.state.status != SUCCESS:
            return None
        return self.state.data.get(descriptor.name)

    def _list_all_concurrently(self) -> dict:
        with ThreadPoolExecutor(max_workers=len(self.descriptors)) as pool:
            futures = {
                d.name: pool.submit(self.client.resource(d.resource).list_all)
                for d in self.descriptors
            }
            # Both requests settle before either result is looked at
            wait(futures.values())
        return {name: len(as_record_list(f.result())) for name, f in futures.items()}

    def refresh(self) -> bool:
        return self._fetch(self._list_all_concurrently, "Failed to fetch dashboard data")
