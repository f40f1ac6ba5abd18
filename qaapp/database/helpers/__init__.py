"""
The `helpers` package provides utility functions and decorators
that support database operations and cross-cutting concerns.

Contents
--------
- transactionManagement
    Provides tools for database transaction management:
        - Context variable (`db_session_context`) for propagating the active session across function calls without explicit passing
        - `@transactional` decorator for wrapping functions in a managed transaction:
            - Reuses an existing session if one is active in context
            - Creates a session on the given `engine`, commits, and closes it otherwise
            - Rolls back the session on errors

- flat_lists
    Split/join helpers for the comma-separated text columns used in place of join tables.
"""
