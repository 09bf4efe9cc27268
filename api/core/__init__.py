"""
Building blocks shared by every feature package: the asyncpg pool,
environment settings, root logging, error types and response shapes.

Table-specific SQL stays in the feature packages (`ports/`, `trade/`, ...).
"""
