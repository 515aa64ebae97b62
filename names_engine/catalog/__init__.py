"""
Catalog of the divine names.

Responsibilities:
- Hold the fixed, ordered set of names with their meanings and benefits.
- Offer read-only lookup by label and a simple browse filter.
"""
