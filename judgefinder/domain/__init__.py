"""
Domain layer.

Judges and their court positions, eligibility rules for bias analysis and
advertising, and advertising pricing. Nothing here imports FastAPI,
pydantic or structlog, and nothing here logs; failures come back as
``Err`` values carrying a DomainError.
"""
