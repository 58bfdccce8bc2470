"""Infrastructure layer: display helpers backed by third-party libraries."""

from person_builder.infrastructure.phone import format_phone_number
from person_builder.infrastructure.ssn import mask_social

__all__ = ["format_phone_number", "mask_social"]
