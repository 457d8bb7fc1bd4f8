"""API models for schedule endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from proposals.models.draft import Schedule
from proposals.models.enums import Night


class DeriveScheduleRequest(BaseModel):
    """Nights to derive a schedule from."""

    model_config = ConfigDict(
        # Note: strict=False allows string-to-enum coercion from JSON
        strict=False,
        json_schema_extra={
            "examples": [
                {
                    "nights_selected": [
                        "Monday Night",
                        "Tuesday Night",
                        "Wednesday Night",
                        "Thursday Night",
                    ]
                }
            ]
        },
    )

    nights_selected: list[Night] = Field(
        ...,
        max_length=7,
        description="Selected nights in any order",
    )


class ToggleNightRequest(BaseModel):
    """Toggle one night in a selection."""

    model_config = ConfigDict(strict=False)

    nights_selected: list[Night] = Field(default_factory=list, max_length=7)
    night: Night = Field(..., description="Night to add or remove")
    available_nights: Optional[list[Night]] = Field(
        default=None,
        description="Nights offered by the listing; omit for all nights",
    )


class ToggleNightResponse(BaseModel):
    """Selection after a toggle with its derived schedule."""

    nights_selected: list[Night] = Field(..., description="Selection in week order")
    changed: bool = Field(..., description="False when the toggle was rejected")
    schedule: Optional[Schedule] = Field(
        default=None,
        description="Derived schedule, null when no night is selected",
    )
