"""
Service layer abstraction.

The service layer owns every SQL statement issued against the
``services`` table.  It receives the connection pool handle explicitly
so that API handlers never reach for a module-level connection.
"""
