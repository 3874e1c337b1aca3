"""Services Layer — task and user use cases.

Invariants:
    - Every public method owns exactly one transaction scope
    - Services return DTOs, never ORM entities
"""
