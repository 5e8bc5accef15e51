"""City domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class City:
    """Represents a city cell of the transport network grid."""

    id: int
    row: int
    col: int
    name: str = field(default="", compare=False)  # Defaults to "G_<row>_<col>"

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", f"G_{self.row}_{self.col}")
