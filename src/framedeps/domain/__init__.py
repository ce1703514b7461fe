"""Domain layer — graph ordering, link-table parsing, platforms.

This layer depends only on stdlib and networkx.
It must never import from services, infrastructure, commands, or config.
"""
