"""Domain layer — field rules, age calculation, and the person record.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
