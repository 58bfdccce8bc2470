"""Phone number display formatting for validated persons."""

import phonenumbers

from person_builder.config import DEFAULT_PHONE_REGION
from person_builder.domain import ValidatedPerson


def format_phone_number(person: ValidatedPerson, default_region: str | None = None) -> str:
    """Return the person's phone number in national format, e.g. "(202) 555-1234".

    default_region is a region code such as Settings.phone_region; US when omitted.
    Returns the raw validated digits if phonenumbers cannot parse with that region.
    """
    region = default_region or DEFAULT_PHONE_REGION
    try:
        parsed = phonenumbers.parse(person.phone_number, region)
    except phonenumbers.NumberParseException:
        return person.phone_number
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.NATIONAL)
