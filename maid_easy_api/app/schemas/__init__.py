"""
Pydantic schema definitions for API payloads and stored records.

Each entity module defines its input schema (what clients may send),
its record model (what the store keeps and the API returns) and the
function that turns the former into the latter.  Server‑assigned
fields such as ids, timestamps and booking status never appear in
input schemas.
"""
