from .entity import EntityDescriptor, FieldSpec, Column, Section
from .patient import PATIENT
from .doctor import DOCTOR

ENTITIES = (PATIENT, DOCTOR)

__all__ = [
    "EntityDescriptor",
    "FieldSpec",
    "Column",
    "Section",
    "PATIENT",
    "DOCTOR",
    "ENTITIES",
]
