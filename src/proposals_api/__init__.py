"""REST preview API for host proposal review.

Stateless endpoints that let the presentation layer derive schedules,
quote prices and diff a draft against its proposal.
"""
