"""
Feature modules for the Chakula backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py: Business logic implementation
- repository.py: Supabase data access
- exceptions.py: Module-specific exceptions

HTTP routes live in api/routes and call modules through their interfaces.
"""
