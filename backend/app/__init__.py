"""
Memos Backend — Tag Service Package
====================================

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, body decoding
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← validation, suggestions, activity
    ├─────────────────────────────────────┤
    │         Store (Interface)           │  ← injected per request
    ├─────────────────────────────────────┤
    │   SQLStore + Models (Persistence)   │  ← async SQLAlchemy
    └─────────────────────────────────────┘

    The authenticated user flows down as an explicit argument; no layer
    reads it from global request state.
"""

__version__ = "0.9.0"
