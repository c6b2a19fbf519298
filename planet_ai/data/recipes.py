"""Static combination recipes for complex resources.

Each complex resource is made from exactly two inputs plus one charged
energy cell:

  water       hydrogen + oxygen
  diamond     carbon   + carbon
  life        water    + carbon
  robot       silicon  + life
  dolphin     water    + life
  ai_partner  robot    + diamond

Input order does not matter.
"""

from dataclasses import dataclass

from planet_ai.models.resource import BasicResourceType, ComplexResourceType

ResourceType = BasicResourceType | ComplexResourceType


@dataclass(frozen=True)
class Recipe:
    output: ComplexResourceType
    inputs: tuple[ResourceType, ResourceType]

    def matches(self, first: ResourceType, second: ResourceType) -> bool:
        return sorted((first.value, second.value)) == sorted(i.value for i in self.inputs)


COMPLEX_RECIPES: dict[ComplexResourceType, Recipe] = {
    ComplexResourceType.water: Recipe(
        output=ComplexResourceType.water,
        inputs=(BasicResourceType.hydrogen, BasicResourceType.oxygen),
    ),
    ComplexResourceType.diamond: Recipe(
        output=ComplexResourceType.diamond,
        inputs=(BasicResourceType.carbon, BasicResourceType.carbon),
    ),
    ComplexResourceType.life: Recipe(
        output=ComplexResourceType.life,
        inputs=(ComplexResourceType.water, BasicResourceType.carbon),
    ),
    ComplexResourceType.robot: Recipe(
        output=ComplexResourceType.robot,
        inputs=(BasicResourceType.silicon, ComplexResourceType.life),
    ),
    ComplexResourceType.dolphin: Recipe(
        output=ComplexResourceType.dolphin,
        inputs=(ComplexResourceType.water, ComplexResourceType.life),
    ),
    ComplexResourceType.ai_partner: Recipe(
        output=ComplexResourceType.ai_partner,
        inputs=(ComplexResourceType.robot, ComplexResourceType.diamond),
    ),
}


def get_recipe(output: ComplexResourceType) -> Recipe:
    """Return the recipe for a complex resource or raise KeyError."""
    recipe = COMPLEX_RECIPES.get(output)
    if recipe is None:
        raise KeyError(f"No recipe for complex resource: '{output}'")
    return recipe
