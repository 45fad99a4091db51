"""
Trip management data layer.

Trips, customers and bookings live in a relational database; every
business rule that must hold for direct inserts (date ranges, positive
prices and seats, the completed-trip guard, the booking audit log) is
enforced by the schema itself. The services/ package is the named call
surface over that schema.
"""

__all__: list[str] = []
