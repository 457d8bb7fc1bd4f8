"""User-visible messages emitted by the editing session."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .enums import NotificationType


class Notification(BaseModel):
    """A notification request for the presentation layer to display."""

    model_config = ConfigDict(strict=True, frozen=True)

    type: NotificationType
    title: str
    content: Optional[str] = None


class ConfirmationPrompt(BaseModel):
    """Content of the final confirmation popup."""

    model_config = ConfigDict(strict=True, frozen=True)

    title: str
    content: str
    confirm_label: str
    is_counteroffer: bool
