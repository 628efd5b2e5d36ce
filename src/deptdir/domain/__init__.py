"""Domain layer — command types, grammars, and the sorted directory.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
