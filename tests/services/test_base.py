"""Tests for BaseService and service inheritance."""

import pytest

from framedeps.infrastructure.project import Project
from framedeps.services.archive import ArchiveService
from framedeps.services.base import BaseService
from framedeps.services.inference import InferenceService
from framedeps.services.ordering import OrderService


class TestBaseService:
    def test_project_stored(self, project: Project) -> None:
        service = BaseService(project)
        assert service._project is project

    def test_subclass_pattern(self, project: Project) -> None:
        class MyService(BaseService):
            def do_thing(self) -> str:
                return f"project at {self._project.root}"

        assert str(project.root) in MyService(project).do_thing()


ALL_SERVICES = [OrderService, InferenceService, ArchiveService]


class TestServiceInheritance:
    @pytest.mark.parametrize("service_cls", ALL_SERVICES, ids=lambda c: c.__name__)
    def test_inherits_base_service(self, service_cls: type) -> None:
        assert issubclass(service_cls, BaseService)

    @pytest.mark.parametrize("service_cls", ALL_SERVICES, ids=lambda c: c.__name__)
    def test_project_injection(self, service_cls: type, project: Project) -> None:
        assert service_cls(project)._project is project
