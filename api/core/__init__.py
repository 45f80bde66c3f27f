"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, settings, logging, error handlers). Keep entity-specific SQL and
request decisions in the corresponding feature package (e.g. `restaurants/`).
"""
