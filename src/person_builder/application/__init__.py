"""Application layer: person construction, editing, and validation. Depends only on domain."""

from person_builder.application.dto import InvalidField
from person_builder.application.builder import (
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

__all__ = [
    "InvalidField",
    "create_person",
    "edit_first_name",
    "edit_last_name",
    "edit_number",
    "edit_person",
    "edit_social",
    "edit_status",
    "validate_person",
    "validation_errors",
]
