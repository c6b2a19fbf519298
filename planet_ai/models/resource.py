import enum
from typing import Union

from pydantic import BaseModel


class BasicResourceType(str, enum.Enum):
    hydrogen = "hydrogen"
    oxygen = "oxygen"
    carbon = "carbon"
    silicon = "silicon"


class ComplexResourceType(str, enum.Enum):
    water = "water"
    diamond = "diamond"
    life = "life"
    robot = "robot"
    dolphin = "dolphin"
    ai_partner = "ai_partner"


class BasicResource(BaseModel):
    kind: BasicResourceType

    model_config = {"frozen": True}


class ComplexResource(BaseModel):
    kind: ComplexResourceType

    model_config = {"frozen": True}


Resource = Union[BasicResource, ComplexResource]


class ComplexResourceRequest(BaseModel):
    """Ask for `target` to be combined from two input resources.

    The inputs travel with the request and are handed back if the
    combination fails.
    """

    target: ComplexResourceType
    first: Resource
    second: Resource
