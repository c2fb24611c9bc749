"""
Service layer.

Each service wraps one request-scoped session and enforces the business rules
for one resource.
"""
