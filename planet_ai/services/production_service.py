"""Production service — turns charged energy cells into resources.

Generator
  Produces basic resources.  Each call spends the charge of one cell and only
  works for resource types listed in the planet's generation rules.

Combinator
  Produces complex resources from two inputs plus one charged cell, following
  the recipes in planet_ai.data.recipes.  A failed combination hands both inputs
  back through CombinationError so the caller never loses them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from planet_ai.data.recipes import get_recipe
from planet_ai.models.energy_cell import EnergyCell
from planet_ai.models.resource import (
    BasicResource,
    BasicResourceType,
    ComplexResource,
    ComplexResourceRequest,
    ComplexResourceType,
    Resource,
)

logger = logging.getLogger(__name__)


class CombinationError(ValueError):
    """A combination was refused; `inputs` are returned untouched."""

    def __init__(self, reason: str, inputs: tuple[Resource, Resource]) -> None:
        super().__init__(reason)
        self.reason = reason
        self.inputs = inputs


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

class Generator:
    def __init__(self, rules: Iterable[BasicResourceType] = ()) -> None:
        self._rules: list[BasicResourceType] = list(dict.fromkeys(rules))

    def all_available_recipes(self) -> list[BasicResourceType]:
        return list(self._rules)

    def contains(self, resource_type: BasicResourceType) -> bool:
        return resource_type in self._rules

    def make(self, resource_type: BasicResourceType, cell: EnergyCell) -> BasicResource:
        """Produce one basic resource, discharging `cell`.

        Raises ValueError if the resource is not in this generator's rules or
        the cell is empty; the cell is untouched in both cases.
        """
        if not self.contains(resource_type):
            raise ValueError(f"Generator has no recipe for '{resource_type.value}'")
        cell.discharge()
        logger.debug("Generated %s", resource_type.value)
        return BasicResource(kind=resource_type)


# ---------------------------------------------------------------------------
# Combinator
# ---------------------------------------------------------------------------

class Combinator:
    def __init__(self, rules: Iterable[ComplexResourceType] = ()) -> None:
        self._rules: list[ComplexResourceType] = list(dict.fromkeys(rules))

    def all_available_recipes(self) -> list[ComplexResourceType]:
        return list(self._rules)

    def contains(self, resource_type: ComplexResourceType) -> bool:
        return resource_type in self._rules

    def make(self, request: ComplexResourceRequest, cell: EnergyCell) -> ComplexResource:
        """Combine the two inputs of `request` into its target, discharging `cell`.

        Raises CombinationError (carrying both inputs) if the target is not
        supported, the inputs do not match the recipe, or the cell is empty.
        """
        inputs = (request.first, request.second)
        target = request.target

        if not self.contains(target):
            raise CombinationError(f"Combinator has no recipe for '{target.value}'", inputs)

        recipe = get_recipe(target)
        if not recipe.matches(request.first.kind, request.second.kind):
            expected = " + ".join(i.value for i in recipe.inputs)
            raise CombinationError(
                f"'{target.value}' needs {expected}, got "
                f"{request.first.kind.value} + {request.second.kind.value}",
                inputs,
            )

        try:
            cell.discharge()
        except ValueError as exc:
            raise CombinationError(str(exc), inputs) from exc

        logger.debug("Combined %s", target.value)
        return ComplexResource(kind=target)
