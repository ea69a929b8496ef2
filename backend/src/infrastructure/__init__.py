"""
Infrastructure Layer - Configuration and persistence.

This layer contains the concrete implementations of the domain repository
contracts on top of SQLAlchemy, plus settings and logging.
"""
