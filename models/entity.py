# models/entity.py

from dataclasses import dataclass

# Input kinds understood by the form renderer
TEXT = "text"
EMAIL = "email"
TEL = "tel"
NUMBER = "number"
SELECT = "select"
TEXTAREA = "textarea"
DATE = "date"


@dataclass(frozen=True)
class FieldSpec:
    # Dotted path into the record, e.g. "contactInfo.phone"
    path: str
    label: str
    kind: str = TEXT
    required: bool = True
    options: tuple = ()
    placeholder: str = ""
    # Shown by the detail view when the value is missing
    fallback: str = ""


@dataclass(frozen=True)
class Column:
    label: str
    path: str
    suffix: str = ""


@dataclass(frozen=True)
class Section:
    title: str
    paths: tuple
    # Wide sections span the full page instead of sharing a row
    wide: bool = False


@dataclass(frozen=True)
class EntityDescriptor:
    """Everything the generic CRUD screens need to know about one entity type."""

    name: str
    plural: str
    title: str
    fields: tuple
    columns: tuple
    sections: tuple
    search_placeholder: str = "Search..."
    id_field: str = "_id"

    @property
    def resource(self) -> str:
        return self.plural

    def field(self, path: str) -> FieldSpec:
        for f in self.fields:
            if f.path == path:
                return f
        raise KeyError(f"{self.name} has no field {path!r}")

    def blank_record(self) -> dict:
        """Initial form shape: every field '', nested groups as dicts of ''."""
        record = {}
        for f in self.fields:
            parent, _, child = f.path.partition(".")
            if child:
                record.setdefault(parent, {})[child] = ""
            else:
                record[parent] = ""
        return record

    # Routes
    @property
    def list_route(self) -> str:
        return f"/{self.plural}"

    @property
    def add_route(self) -> str:
        return f"/{self.plural}/add"

    def edit_route(self, record_id: str) -> str:
        return f"/{self.plural}/edit/{record_id}"

    def view_route(self, record_id: str) -> str:
        return f"/{self.plural}/view/{record_id}"
