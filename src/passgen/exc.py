from dataclasses import dataclass
from typing import TYPE_CHECKING, NotRequired

import pydantic_core
from typing_extensions import TypedDict, override

if TYPE_CHECKING:
    from .policy import Policy

__all__ = (
    "PassgenError",
    "InvalidPolicyError",
)


@dataclass(slots=True)
class PassgenError(Exception):
    """
    Base exception for all passgen errors.
    """

    class Context(TypedDict): ...

    message: str
    ctx: Context | None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True)
class InvalidPolicyError(PassgenError):
    """
    Raised when a password policy cannot be satisfied or is malformed.

    This error is raised before any character is drawn, so a failed call has no
    partial output.
    """

    class Context(TypedDict):
        """
        Attributes:
            policy: The offending policy. Absent when the policy could not be built.
            min_length: The effective minimum length of the policy.
            max_length: The maximum length of the policy.
            errors: Validation errors collected while parsing a policy mapping.
        """

        policy: NotRequired["Policy"]
        min_length: NotRequired[int]
        max_length: NotRequired[int]
        errors: NotRequired[list[pydantic_core.ErrorDetails]]

    ctx: Context
