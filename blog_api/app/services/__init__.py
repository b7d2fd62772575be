"""
Service layer.

``entry_store`` is the persistence boundary used by the cleanup logic;
the remaining services implement CRUD and auditing on top of a
request-scoped SQLite connection.
"""
