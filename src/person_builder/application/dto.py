"""Result types for the validation report."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InvalidField:
    """One field of a draft failed its predicate."""

    field: str
    reason: str
