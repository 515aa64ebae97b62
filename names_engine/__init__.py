"""
Divine names recommendation service.

Responsibilities:
- Hold the fixed catalog of names (Phase 1).
- Recommend the most relevant name for a free-text request (Phase 2).
- Serve both over a small HTTP API for the record layer (Phase 3).
"""
