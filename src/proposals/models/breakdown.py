"""Reservation breakdown view model shown in the preview."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

DAMAGE_DEPOSIT_FOOTNOTE = (
    "*Refundable Damage Deposit is collected before move-in and returned after "
    "checkout if no damages occur."
)


class BreakdownRow(BaseModel):
    """One labelled line of the breakdown.

    ``was`` carries the original display value when the row changed.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    was: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.was is not None


class ReservationBreakdown(BaseModel):
    """Formatted terms and pricing of the current draft."""

    model_config = ConfigDict(frozen=True)

    rows: list[BreakdownRow]
    has_changes: bool
    footnote: str = DAMAGE_DEPOSIT_FOOTNOTE

    def row(self, label: str) -> BreakdownRow:
        """Return the row with the given label.

        Raises:
            KeyError: If no row has that label.
        """
        for row in self.rows:
            if row.label == label:
                return row
        raise KeyError(label)
