from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from planet_ai.data.planet_types import PlanetType
from planet_ai.models.resource import BasicResourceType, ComplexResourceType
from planet_ai.models.rocket_strategy import RocketStrategy


class Settings(BaseSettings):
    planet_id: int = 1
    planet_type: PlanetType = PlanetType.A
    rocket_strategy: RocketStrategy = RocketStrategy.default
    basic_resource: BasicResourceType = BasicResourceType.hydrogen
    combination_rules: list[ComplexResourceType] = []
    log_level: str = "INFO"
    # 0 means unbounded outbound queues
    outbound_queue_size: int = 0

    model_config = SettingsConfigDict(env_prefix="PLANET_", env_file=".env", extra="ignore")

    @field_validator("rocket_strategy", mode="before")
    @classmethod
    def accept_strategy_code(cls, v):
        # Legacy deployments configure the strategy as a small integer.
        if isinstance(v, (int, str)) and not isinstance(v, bool):
            return RocketStrategy.coerce(v)
        return v


settings = Settings()
