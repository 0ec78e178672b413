"""
db/ - Database Layer
====================
PostgreSQL connection pool, scoped transactions, schema bootstrap and the
error type raised when a database operation fails.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
