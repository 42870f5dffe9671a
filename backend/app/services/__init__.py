"""Services Layer — async shell around the pure core rules.

Invariants:
    - Services own IO (DB sessions, Stripe gateway); decisions come from core/
    - Routes call services, services never import from api/

Design Decisions:
    - One shared document store for CRUD, separate modules for calendar,
      subscription sync and data migration
"""
