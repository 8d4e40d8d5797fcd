import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from . import constants
from .conf import Settings
from .exc import InvalidPolicyError
from .policy import Policy, new_policy
from .rand import RandomSource

__all__ = (
    "Generator",
    "generate",
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Generator:
    source: RandomSource = field(default_factory=RandomSource)
    default_policy: Policy = field(default_factory=new_policy)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Generator":
        return cls(
            source=RandomSource(seed=settings.seed),
            default_policy=settings.default_policy,
        )

    def check_policy(self, policy: Policy) -> int:
        """
        Validates ``policy`` and returns its effective minimum length.

        A zero maximum length requests no password and is not checked against the
        minimums.

        Raises:
            InvalidPolicyError: If any length is negative or the effective minimum
                length exceeds a non-zero maximum length.
        """
        if any(value < 0 for value in policy.lengths()):
            raise InvalidPolicyError(
                constants.NEGATIVE_LENGTH, ctx=InvalidPolicyError.Context(policy=policy)
            )

        min_length = policy.effective_min_length
        if policy.max_length and min_length > policy.max_length:
            raise InvalidPolicyError(
                "%s: effective minimum length {ctx[min_length]} is greater than "
                "maximum length {ctx[max_length]}" % constants.MIN_EXCEEDS_MAX,
                ctx=InvalidPolicyError.Context(
                    policy=policy, min_length=min_length, max_length=policy.max_length
                ),
            )
        return min_length

    def generate(self, policy: Optional[Policy] = None) -> str:
        """
        Generates a password satisfying ``policy``.

        The password holds at least ``min_upper`` uppercase letters, ``min_lower``
        lowercase letters, ``min_digits`` digits and ``min_special`` special
        characters. Its length is drawn from ``[effective_min_length, max_length)``,
        or equals ``max_length`` when the effective minimum leaves no room. A policy
        with ``max_length`` of zero yields an empty string whatever its minimums,
        provided none is negative.

        ``policy`` is not modified. The default policy is used when it is omitted.

        Raises:
            InvalidPolicyError: If the policy cannot be satisfied.
        """
        if policy is None:
            policy = self.default_policy

        min_length = self.check_policy(policy)
        if policy.max_length == 0:
            return ""

        passwd = self.source.create_random(constants.UPPERCASE, policy.min_upper)
        passwd += self.source.create_random(constants.LOWERCASE, policy.min_lower)
        passwd += self.source.create_random(constants.DIGITS, policy.min_digits)
        passwd += self.source.create_random(constants.SPECIAL, policy.min_special)

        if len(passwd) < policy.max_length:
            if min_length < policy.max_length:
                length = self.source.random_index(min_length, policy.max_length)
            else:
                length = policy.max_length
            passwd += self.source.create_random(
                constants.ALL_CHARS, length - len(passwd)
            )

        self.source.shuffle(passwd)
        logger.debug(
            "generated password of length %r within [%r, %r)",
            len(passwd),
            min_length,
            policy.max_length,
        )
        return "".join(passwd)


_default_generator: Optional[Generator] = None
_default_generator_lock = threading.Lock()


def get_default_generator() -> Generator:
    global _default_generator

    with _default_generator_lock:
        if _default_generator is None:
            _default_generator = Generator()
        return _default_generator


def generate(policy: Optional[Policy] = None) -> str:
    """Generates a password with the process-wide default generator."""
    return get_default_generator().generate(policy)
