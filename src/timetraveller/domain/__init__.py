"""Domain layer — boundary types, rules, and conversions.

This layer depends only on the stdlib (``datetime``, ``zoneinfo``).
It must never import from services, commands, output, or config.
"""
