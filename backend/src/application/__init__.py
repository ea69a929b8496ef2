"""
Application Layer - Services and use cases.

This layer orchestrates domain entities through the repository contracts
declared by the domain layer.
"""
