"""
Domain and I/O models.

- domain/: Status vocabularies shared by entities and services
- io/: Request/response schemas for the API
"""
