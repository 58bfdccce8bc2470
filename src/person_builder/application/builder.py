"""Draft construction, field editors, and the validation gate.

Flow: create_person -> edit_* (any number, any order) -> validate_person.
Editors never validate; only the gate decides, and it answers with a
ValidatedPerson or None.
"""

import logging
from dataclasses import replace

from person_builder.application.dto import InvalidField
from person_builder.domain import (
    Draft,
    MaritalStatus,
    PersonFields,
    ValidatedPerson,
    is_non_empty,
    is_ten_digit_number,
)
from person_builder.domain.entities import _seal

logger = logging.getLogger(__name__)


def create_person() -> Draft:
    """Return an empty draft: blank names, SSN and phone, status SINGLE."""
    return Draft(fields=PersonFields())


def _edit(draft: Draft, **changes) -> Draft:
    return replace(draft, fields=replace(draft.fields, **changes))


def edit_first_name(first_name: str, draft: Draft) -> Draft:
    return _edit(draft, first_name=first_name)


def edit_last_name(last_name: str, draft: Draft) -> Draft:
    return _edit(draft, last_name=last_name)


def edit_social(social_security_number: str, draft: Draft) -> Draft:
    return _edit(draft, social_security_number=social_security_number)


def edit_status(marital_status: MaritalStatus, draft: Draft) -> Draft:
    return _edit(draft, marital_status=marital_status)


def edit_number(phone_number: str, draft: Draft) -> Draft:
    return _edit(draft, phone_number=phone_number)


def edit_person(draft: Draft) -> Draft:
    """Identity on drafts. Kept for symmetry with the field editors."""
    return draft


def validation_errors(draft: Draft) -> list[InvalidField]:
    """Return every failing field predicate, in check order. Empty list means valid.

    Marital status is never reported: every MaritalStatus member is valid.
    """
    fields = draft.fields
    errors = []
    if not is_non_empty(fields.first_name):
        errors.append(InvalidField(field="first_name", reason="First name is required."))
    if not is_non_empty(fields.last_name):
        errors.append(InvalidField(field="last_name", reason="Last name is required."))
    if not is_ten_digit_number(fields.social_security_number):
        errors.append(
            InvalidField(
                field="social_security_number",
                reason="Social security number must be exactly 10 digits.",
            )
        )
    if not is_ten_digit_number(fields.phone_number):
        errors.append(
            InvalidField(field="phone_number", reason="Phone number must be exactly 10 digits.")
        )
    return errors


def validate_person(draft: Draft) -> ValidatedPerson | None:
    """Promote a draft to a ValidatedPerson, or return None if any field is invalid.

    The fields are carried over as-is; validation does not normalize them.
    """
    errors = validation_errors(draft)
    if errors:
        logger.debug(
            "Person draft rejected: %s", ", ".join(e.field for e in errors)
        )
        return None
    return _seal(draft.fields)
