"""
Pydantic schema definitions for API payloads.

Each domain (users, matches) defines models describing the usual shape
of its request and response bodies.  They feed the generated OpenAPI
page only; the endpoints accept and store bodies exactly as posted.
"""
