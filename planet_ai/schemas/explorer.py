"""Pydantic schemas for messages exchanged with explorers."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from planet_ai.models.resource import (
    BasicResource,
    BasicResourceType,
    ComplexResource,
    ComplexResourceRequest,
    ComplexResourceType,
    Resource,
)


# ---------------------------------------------------------------------------
# Explorer -> Planet
# ---------------------------------------------------------------------------

class SupportedResourceRequest(BaseModel):
    kind: Literal["supported_resource_request"] = "supported_resource_request"
    explorer_id: int


class SupportedCombinationRequest(BaseModel):
    kind: Literal["supported_combination_request"] = "supported_combination_request"
    explorer_id: int


class GenerateResourceRequest(BaseModel):
    kind: Literal["generate_resource_request"] = "generate_resource_request"
    explorer_id: int
    resource: BasicResourceType


class CombineResourceRequest(BaseModel):
    kind: Literal["combine_resource_request"] = "combine_resource_request"
    explorer_id: int
    msg: ComplexResourceRequest


class AvailableEnergyCellRequest(BaseModel):
    kind: Literal["available_energy_cell_request"] = "available_energy_cell_request"
    explorer_id: int


ExplorerToPlanet = Annotated[
    Union[
        SupportedResourceRequest,
        SupportedCombinationRequest,
        GenerateResourceRequest,
        CombineResourceRequest,
        AvailableEnergyCellRequest,
    ],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Planet -> Explorer
# ---------------------------------------------------------------------------

class SupportedResourceResponse(BaseModel):
    kind: Literal["supported_resource_response"] = "supported_resource_response"
    resource_list: list[BasicResourceType]


class SupportedCombinationResponse(BaseModel):
    kind: Literal["supported_combination_response"] = "supported_combination_response"
    combination_list: list[ComplexResourceType]


class GenerateResourceResponse(BaseModel):
    kind: Literal["generate_resource_response"] = "generate_resource_response"
    resource: Optional[BasicResource] = None


class CombineResourceResponse(BaseModel):
    """Either `complex_response` is set, or `error` explains the failure and
    `returned_inputs` hands both inputs back to the explorer."""

    kind: Literal["combine_resource_response"] = "combine_resource_response"
    complex_response: Optional[ComplexResource] = None
    error: Optional[str] = None
    returned_inputs: Optional[tuple[Resource, Resource]] = None


class AvailableEnergyCellResponse(BaseModel):
    kind: Literal["available_energy_cell_response"] = "available_energy_cell_response"
    available_cells: int


PlanetToExplorer = Annotated[
    Union[
        SupportedResourceResponse,
        SupportedCombinationResponse,
        GenerateResourceResponse,
        CombineResourceResponse,
        AvailableEnergyCellResponse,
    ],
    Field(discriminator="kind"),
]
