"""Proposal review services."""

from .breakdown import build_breakdown
from .change_detector import detect_changes, has_changes
from .editing_session import (
    ProposalEditingSession,
    prepare_submission,
    resolve_baseline,
    seed_draft,
)
from .pricing import PricingCalculator, compute_pricing
from .schedule import (
    MAX_NIGHTS_PER_WEEK,
    add_night,
    derive_schedule,
    remove_night,
    toggle_night,
)

__all__ = [
    "MAX_NIGHTS_PER_WEEK",
    "PricingCalculator",
    "ProposalEditingSession",
    "add_night",
    "build_breakdown",
    "compute_pricing",
    "derive_schedule",
    "detect_changes",
    "has_changes",
    "prepare_submission",
    "remove_night",
    "resolve_baseline",
    "seed_draft",
    "toggle_night",
]
