"""
Blogger: CRUD backend for blog posts over HTTP.

Application package root. A small layered service using ports & adapters:
requests flow router -> use case -> repository and back, each layer
passing errors up unchanged until the interface layer classifies them.

Bounded contexts:
    - blog: Blog posts and their word-frequency counts.

Layers:
    - domain: Entities, ports (ABCs), errors. No IO.
    - application: Use cases and command DTOs.
    - infrastructure: SQLAlchemy engine, tables, repository adapter.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (error classification, middleware,
      rate limiting, logging).
    - core: Settings and the dependency container.
"""
