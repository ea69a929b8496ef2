"""
Domain Layer - Entities, value objects, enums and repository contracts.

This layer has no dependency on frameworks or infrastructure.
"""
