"""
Hauge API — Application Package
================================

Layered layout:

    ┌─────────────────────────────────────┐
    │   Routes + Dependencies (HTTP)      │  ← parse, authenticate, respond
    ├─────────────────────────────────────┤
    │   Services                          │  ← validation, tokens, ownership,
    │                                     │    storage operations
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data)           │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   Database (Persistence)            │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
