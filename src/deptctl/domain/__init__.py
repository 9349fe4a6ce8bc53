"""Domain layer — departments, employees, commands, and the directory.

This layer depends only on stdlib.
It must never import from services, config, output, or commands.
"""
