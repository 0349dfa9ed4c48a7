"""
Feature modules for the ProSocial backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- repository.py: Store access and row/document mapping
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions (where needed)

Modules communicate through interfaces, not concrete implementations.
"""
