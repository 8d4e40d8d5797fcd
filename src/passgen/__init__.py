__all__ = (
    "constants",
    "exc",
    "Generator",
    "InvalidPolicyError",
    "PassgenError",
    "Policy",
    "RandomSource",
    "Settings",
    "generate",
    "new_policy",
    "parse_policy",
)
__version__ = "0.2.0"

from . import constants, exc
from .conf import Settings
from .exc import InvalidPolicyError, PassgenError
from .generator import Generator, generate
from .policy import Policy, new_policy, parse_policy
from .rand import RandomSource
