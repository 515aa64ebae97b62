"""
Name recommendation engine.

Responsibilities:
- Filter the catalog to names whose fields literally appear in a request.
- Score every name against a request using word, label and theme rules.
- Pick the single best name, falling back to the first catalog entry.
"""
