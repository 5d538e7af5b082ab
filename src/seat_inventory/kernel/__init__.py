"""Kernel – identifiers, errors, clocks and the event-sourcing base classes.

Nothing in here knows about seats; ``seat_inventory.registration`` builds
the inventory aggregate on top of it.
"""
