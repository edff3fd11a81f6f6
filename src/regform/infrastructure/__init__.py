"""Infrastructure layer — local persistence.

Infrastructure may import from domain but never from services or commands.
"""
