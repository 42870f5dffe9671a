"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure imports only core/errors from the core layer
    - External failures mapped to MaagError subclasses at this boundary

Design Decisions:
    - Thin wrappers over raw clients (database, Stripe, logging)
"""
