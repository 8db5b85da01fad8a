"""Services Layer — orchestrates the store write and event publication.

Invariants:
    - Services depend on core/ protocols, never on concrete infrastructure classes
"""
