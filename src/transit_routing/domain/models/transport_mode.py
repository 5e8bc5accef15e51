"""Transport mode domain model."""

from enum import Enum


class TransportMode(str, Enum):
    """Closed set of modes a departure can be operated with."""

    BUS = "bus"
    RAIL = "rail"

    @property
    def display_name(self) -> str:
        """Human readable name, used only when labelling output."""
        return "Bus" if self is TransportMode.BUS else "Rail"

    @classmethod
    def parse(cls, value: str) -> "TransportMode":
        """Parse a mode tag, accepting the legacy 'autobus'/'voz' tags as well."""
        normalized = value.strip().lower()
        aliases = {"autobus": cls.BUS, "voz": cls.RAIL, "train": cls.RAIL}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown transport mode: {value!r}") from None
