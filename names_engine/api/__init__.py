"""
HTTP surface for the record layer.

Responsibilities:
- Define request and response schemas for catalog and suggestion endpoints.
- Convert catalog entries and suggestions into serialisable models.
"""
