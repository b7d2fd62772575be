"""
Pydantic schema definitions for API payloads.

Schemas are separated from the records in ``app.models`` to decouple
the HTTP representation from persistence.
"""
