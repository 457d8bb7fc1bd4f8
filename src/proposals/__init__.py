"""Host review of lodging reservation proposals.

Night schedule derivation, change detection against the original
proposal, pricing recomputation and the editing session that decides
between accepting as-is and sending a counteroffer.
"""

__version__ = "0.1.0"
