"""Change set models for comparing a draft with the original proposal."""

from pydantic import BaseModel, ConfigDict

from .enums import TrackedField


class FieldChange(BaseModel):
    """Change flag and display values for one tracked field."""

    model_config = ConfigDict(frozen=True)

    changed: bool
    current: str
    original: str


class ChangeSet(BaseModel):
    """Per-field comparison of a draft against the original proposal.

    Recomputed on every draft mutation, never persisted.
    """

    model_config = ConfigDict(frozen=True)

    fields: dict[TrackedField, FieldChange]
    weeks_changed: bool = False

    @property
    def any_changed(self) -> bool:
        return any(change.changed for change in self.fields.values())

    @property
    def per_field(self) -> dict[TrackedField, bool]:
        return {name: change.changed for name, change in self.fields.items()}

    @property
    def scheduling_changed(self) -> bool:
        """Whether nights or weeks changed, which changes the night total."""
        return self.fields[TrackedField.NIGHTS_SELECTED].changed or self.weeks_changed

    def is_changed(self, field: TrackedField) -> bool:
        return self.fields[field].changed
