from collections.abc import Mapping
from typing import Any

import pydantic
from pydantic import ConfigDict, StrictInt
from pydantic.alias_generators import to_camel

from . import constants
from .exc import InvalidPolicyError
from .util.pydantic import convert_errors, format_errors

__all__ = (
    "Policy",
    "new_policy",
    "parse_policy",
)


class Policy(pydantic.BaseModel):
    """
    Length and character class constraints of a generated password.

    Negative values are accepted here and rejected by the generator, so a policy can
    be built up field by field before it is used.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )

    min_length: StrictInt = constants.DEFAULT_MIN_LENGTH
    max_length: StrictInt = constants.DEFAULT_MAX_LENGTH
    min_upper: StrictInt = 0
    min_lower: StrictInt = 0
    min_digits: StrictInt = 0
    min_special: StrictInt = 0

    @property
    def effective_min_length(self) -> int:
        return max(
            self.min_length,
            self.min_upper + self.min_lower + self.min_digits + self.min_special,
        )

    def lengths(self) -> tuple[int, ...]:
        return (
            self.min_length,
            self.max_length,
            self.min_upper,
            self.min_lower,
            self.min_digits,
            self.min_special,
        )


def new_policy() -> Policy:
    """Returns the default policy: 6 to 16 characters, no class minimums."""
    return Policy()


def parse_policy(data: Mapping[str, Any]) -> Policy:
    """
    Builds a policy from a mapping keyed by camelCase (``minLength``) or snake_case
    (``min_length``) field names. Missing fields take their defaults.

    Raises:
        InvalidPolicyError: If the mapping has unknown keys or non-integer values.
    """
    try:
        return Policy.model_validate(data)
    except pydantic.ValidationError as ex:
        errors = convert_errors(ex)
        details = format_errors(errors).replace("{", "{{").replace("}", "}}")
        raise InvalidPolicyError(
            "%s:\n%s" % (constants.MALFORMED_POLICY, details),
            ctx=InvalidPolicyError.Context(errors=errors),
        ) from ex
