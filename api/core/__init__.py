"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(resource stores, settings, logging). Keep feature-specific records and
business logic in the corresponding feature package (e.g. `forecasts/`).
"""
