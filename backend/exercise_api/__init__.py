"""Application package for the exercise-management web tier.

This package exposes the entity, data-access and handler modules used by
the FastAPI application. It is intentionally lightweight; individual
modules contain the concrete implementations and documentation.
"""
