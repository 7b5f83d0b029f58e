"""
Feature modules for the iMall backend.

- users: user records and the credential store contract
- auth: password hashing, tokens, the auth service and its /api/auth routes
- session: client-side session state and the navigation gate

A module exposes Protocol interfaces and depends on other modules only
through them; api.dependencies picks the concrete implementations.
"""
