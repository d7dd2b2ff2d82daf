"""
Natours — tours booking REST backend.

Application package root. This is a small monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - tours: CRUD over the tour collection.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports (JSON file store).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
