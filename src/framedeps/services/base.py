"""BaseService — foundation for all framedeps services.

Every service receives a :class:`Project` at construction time. The
Project provides the project directory, the merged search paths, and the
external-tool collaborators; services never read settings directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from framedeps.infrastructure.project import Project


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class OrderService(BaseService):
            def order(self, graph, nodes=None) -> ServiceResult:
                ...
    """

    def __init__(self, project: Project) -> None:
        self._project = project
