"""
Load listing models.

A Load is immutable once the catalog is built: the model is frozen so
handlers cannot mutate catalog records through a shared reference.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Load(BaseModel):
    """Freight shipment listing offered to carriers."""

    model_config = ConfigDict(frozen=True)

    load_id: str = Field(
        min_length=1,
        description="Unique load identifier",
        examples=["L001"],
    )
    origin: str = Field(
        description="Pickup location",
        examples=["Los Angeles, CA"],
    )
    destination: str = Field(
        description="Delivery location",
        examples=["Phoenix, AZ"],
    )
    equipment_type: str = Field(
        description="Required trailer type",
        examples=["Dry Van", "Reefer", "Flatbed"],
    )
    loadboard_rate: Union[int, float] = Field(
        ge=0,
        description="Posted rate in USD",
    )

    # Listing details carried by the dataset but not used for search
    pickup_datetime: Optional[str] = None
    delivery_datetime: Optional[str] = None
    notes: Optional[str] = None
    weight: Optional[float] = Field(default=None, ge=0, description="Weight in lbs")
    commodity_type: Optional[str] = None
    num_of_pieces: Optional[int] = Field(default=None, ge=0)
    miles: Optional[float] = Field(default=None, ge=0)
    dimensions: Optional[str] = None


class LoadSearchCriteria(BaseModel):
    """
    Optional search predicates, combined with AND.

    Absent (None or empty string) criteria impose no constraint.
    """

    origin: Optional[str] = Field(
        default=None,
        description="Case-insensitive substring of the origin",
    )
    destination: Optional[str] = Field(
        default=None,
        description="Case-insensitive substring of the destination",
    )
    equipment_type: Optional[str] = Field(
        default=None,
        description="Case-insensitive exact equipment type",
    )
    min_rate: Optional[float] = Field(
        default=None,
        description="Inclusive lower bound on loadboard_rate",
    )
    max_rate: Optional[float] = Field(
        default=None,
        description="Inclusive upper bound on loadboard_rate",
    )


class LoadSearchResult(BaseModel):
    """Filtered loads in catalog order."""

    data: list[Load]
    count: int = Field(ge=0)
