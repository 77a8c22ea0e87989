"""Domain layer: value objects, comparators, and entity schemas.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
It never logs: failures are raised and left to the caller to translate.
"""
