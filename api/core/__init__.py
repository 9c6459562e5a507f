"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, errors, SQL helpers, date formatting, logging). Keep
feature-specific SQL in the corresponding feature package (e.g. `camps/`).
"""
