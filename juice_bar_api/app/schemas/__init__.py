"""
Pydantic schema definitions for API payloads and stored records.

Attributes use snake_case in Python and camelCase on the wire
(``inStock``, ``customerName``); both spellings are accepted on input.
"""
