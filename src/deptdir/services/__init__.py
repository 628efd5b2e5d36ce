"""Service layer — command execution returning ServiceResult.

Services may import from domain, config, and output.
They must never import from commands.
"""
