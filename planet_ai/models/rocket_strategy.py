import enum


class RocketStrategy(str, enum.Enum):
    """How eagerly a planet spends charged cells on rockets.

    disabled           never builds; launches a rocket only if one exists
    default            builds on demand when an asteroid arrives
    safe               also builds when a sunray would overflow the bank,
                       and rebuilds right after every launch
    emergency_reserve  behaves like safe, but hides one charged cell from
                       every outward report and from resource generation
    """

    disabled = "disabled"
    default = "default"
    safe = "safe"
    emergency_reserve = "emergency_reserve"

    @classmethod
    def from_code(cls, code: int) -> "RocketStrategy":
        """Map the legacy integer rocket knob onto a strategy.

        0 disables rockets, 1 and 2 both select the safe behaviour (build on
        overflow, rebuild after launch), 3 selects emergency_reserve.
        """
        mapping = {
            0: cls.disabled,
            1: cls.safe,
            2: cls.safe,
            3: cls.emergency_reserve,
        }
        strategy = mapping.get(code)
        if strategy is None:
            raise ValueError(f"Unknown rocket strategy code: {code}")
        return strategy

    @classmethod
    def coerce(cls, value) -> "RocketStrategy":
        """Accept a strategy, its name, or a legacy integer code (int or digit string)."""
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_code(value)
        if isinstance(value, str) and value.isdigit():
            return cls.from_code(int(value))
        return cls(value)
