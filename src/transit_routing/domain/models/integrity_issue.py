"""Data integrity issue domain model."""

from pydantic import BaseModel, ConfigDict


class DataIntegrityIssue(BaseModel):
    """A defect in the network data found while searching, such as a dangling station id."""

    model_config = ConfigDict(frozen=True)

    station_id: str
    destination_id: str
    reason: str
