"""Domain entities: MaritalStatus, PersonFields, and the two Person stages (Draft, ValidatedPerson)."""

from dataclasses import dataclass, field
from enum import Enum


class MaritalStatus(Enum):
    """Filing status of a person. Closed set; every member is valid."""

    SINGLE = "single"
    MARRIED = "married"
    JOINT_FILING = "joint_filing"
    SEPARATE_FILING = "separate_filing"
    HEAD_OF_HOUSEHOLD = "head_of_household"
    SURVIVING_SPOUSE = "surviving_spouse"


@dataclass(frozen=True)
class PersonFields:
    """
    The record carried by every Person, whatever its stage.
    No checks here: any combination of values is a legal draft.
    """

    first_name: str = ""
    last_name: str = ""
    social_security_number: str = ""
    marital_status: MaritalStatus = MaritalStatus.SINGLE
    phone_number: str = ""


class _PersonView:
    """Read accessors shared by both stages."""

    fields: PersonFields

    @property
    def first_name(self) -> str:
        return self.fields.first_name

    @property
    def last_name(self) -> str:
        return self.fields.last_name

    @property
    def social_security_number(self) -> str:
        return self.fields.social_security_number

    @property
    def marital_status(self) -> MaritalStatus:
        return self.fields.marital_status

    @property
    def phone_number(self) -> str:
        return self.fields.phone_number


@dataclass(frozen=True)
class Draft(_PersonView):
    """
    A Person still being edited.
    Editing never mutates a Draft; every edit returns a new one.
    """

    fields: PersonFields = field(default_factory=PersonFields)


class _Seal:
    """Proof that a specific PersonFields value passed the validation gate."""

    __slots__ = ("fields",)

    def __init__(self, fields: PersonFields) -> None:
        self.fields = fields


def _seal(fields: PersonFields) -> "ValidatedPerson":
    # Only the validation gate calls this; see application.builder.
    return ValidatedPerson(fields=fields, _proof=_Seal(fields))


@dataclass(frozen=True)
class ValidatedPerson(_PersonView):
    """
    A Person whose fields passed every field predicate.
    Produced only by validate_person; there is no way back to a Draft.
    The seal is bound to the exact fields it was issued for, so
    dataclasses.replace cannot swap in unchecked fields.
    """

    fields: PersonFields
    _proof: object = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        proof = self._proof
        if not isinstance(proof, _Seal) or proof.fields is not self.fields:
            raise TypeError("ValidatedPerson can only be produced by validate_person.")
