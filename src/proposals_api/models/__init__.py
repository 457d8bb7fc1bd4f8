"""API-specific request/response models.

Domain models (Proposal, Schedule, PricingSnapshot, ...) live in
proposals.models and are reused here where appropriate.

Modules:
- schedule: Night selection and schedule derivation
- pricing: Pricing quotes
- proposals: Draft review against a proposal
"""

__all__: list[str] = []
