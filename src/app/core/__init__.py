"""Core services and cross-cutting concerns.

This module intentionally does not re-export symbols from submodules
to avoid circular imports (``app.config`` itself imports
``app.core.constants``). Import directly from submodules when needed:

- app.core.database: Base, get_db, UTCDateTime and the model mixins
- app.core.errors: AppException, NotFoundError, BookingConflictError, etc.
- app.core.auth: token handling and session dependencies
- app.core.permissions: roles and guard functions
- app.core.locks: per-resource admission locks
"""
