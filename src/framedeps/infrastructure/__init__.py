"""Infrastructure layer — filesystem walks, external tools, project paths.

This layer depends on stdlib and the domain layer.
It must never import from services, commands, or output.
The service layer bridges between domain rules and infrastructure.
"""
