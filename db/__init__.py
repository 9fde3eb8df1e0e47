"""
db/ - Database Layer
====================
Handles PostgreSQL connections, schema initialization, the error taxonomy
and the partial-update query compiler.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
