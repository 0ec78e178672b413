"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for one aggregate.
Repositories receive raw rows from the database and return domain model objects.
"""
