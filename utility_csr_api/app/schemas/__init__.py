"""
Pydantic schema definitions.

``billing`` holds the unified customer and bill models every tenant is
normalized into; ``ticket`` and ``tool_call`` describe request and
response bodies of the HTTP API.
"""
