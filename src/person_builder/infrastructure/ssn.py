"""Social security number masking for display."""

from person_builder.domain import ValidatedPerson

VISIBLE_DIGITS = 4


def mask_social(person: ValidatedPerson) -> str:
    """Return the SSN with all but the last four digits replaced by '*'."""
    ssn = person.social_security_number
    hidden = len(ssn) - VISIBLE_DIGITS
    return "*" * hidden + ssn[hidden:]
