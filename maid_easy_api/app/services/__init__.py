"""
Service layer abstraction.

Services hold business logic that is shared between several handlers
or used during application bootstrap (for example credential checks
and seeding the administrator account).
"""
