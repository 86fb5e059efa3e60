"""
Recommendation engine.

Responsibilities:
- Extract hardware attributes from catalog free text.
- Map a use case to its profile and compute three budget tiers.
- Score in-stock candidates per tier and pick one product per tier.
- Return deduplicated recommendations ready for API serialisation.
"""
