"""Domain layer: Person record, stages, and field predicates. No dependencies on outer layers."""

from person_builder.domain.entities import Draft, MaritalStatus, PersonFields, ValidatedPerson
from person_builder.domain.predicates import is_non_empty, is_ten_digit_number

__all__ = [
    "Draft",
    "MaritalStatus",
    "PersonFields",
    "ValidatedPerson",
    "is_non_empty",
    "is_ten_digit_number",
]
