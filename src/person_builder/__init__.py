"""
Person builder: staged construction of a validated Person record.

- domain: PersonFields, MaritalStatus, Draft and ValidatedPerson stages, field predicates.
- application: create_person, edit_* editors, validate_person gate, validation report.
- infrastructure: display helpers (phone formatting, SSN masking).
"""

from person_builder.application import (
    InvalidField,
    create_person,
    edit_first_name,
    edit_last_name,
    edit_number,
    edit_person,
    edit_social,
    edit_status,
    validate_person,
    validation_errors,
)
from person_builder.config import Settings, configure_logging, load_settings
from person_builder.domain import Draft, MaritalStatus, PersonFields, ValidatedPerson
from person_builder.infrastructure import format_phone_number, mask_social

__all__ = [
    "Draft",
    "InvalidField",
    "MaritalStatus",
    "PersonFields",
    "Settings",
    "ValidatedPerson",
    "configure_logging",
    "create_person",
    "edit_first_name",
    "edit_last_name",
    "edit_number",
    "edit_person",
    "edit_social",
    "edit_status",
    "format_phone_number",
    "load_settings",
    "mask_social",
    "validate_person",
    "validation_errors",
]
