from typing import Annotated, Optional

import annotated_types
import pydantic
import pydantic.alias_generators
from pydantic.dataclasses import dataclass

from .policy import Policy, new_policy


@dataclass(
    config=pydantic.ConfigDict(
        alias_generator=pydantic.alias_generators.to_camel,
        populate_by_name=True,
        extra="forbid",
    )
)
class Settings:
    """
    Attributes:
        default_policy: Policy used when a password is requested without one.
        seed: Seed of the random source. ``None`` seeds from the operating system.
    """

    default_policy: Policy = pydantic.Field(default_factory=new_policy)
    seed: Optional[Annotated[int, annotated_types.Ge(0)]] = None
