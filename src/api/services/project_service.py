"""
프로젝트 관리 서비스 레이어
"""

import logging
from typing import Any, List, Optional

from src.api.exceptions import DuplicateProjectError, MissingFieldError, ProjectNotFoundError
from src.api.schemas.project import Project
from src.api.services.store import ProjectStore
from src.config import config

logger = logging.getLogger("projecthub.service")


def require_field(field: str, value: Any) -> Any:
    """값이 None 이거나 빈 문자열이면 MissingFieldError"""
    if value is None or value == "":
        raise MissingFieldError(field)
    return value


class ProjectService:
    @staticmethod
    def list_projects(store: ProjectStore) -> List[Project]:
        """프로젝트 목록 조회"""
        return store.all()

    @staticmethod
    def get_project(store: ProjectStore, project_id: str) -> Project:
        """프로젝트 조회 (첫 번째 일치 항목)"""
        project = store.find(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    @staticmethod
    def create_project(
        store: ProjectStore,
        project_id: str,
        title: str,
        allow_duplicate_ids: Optional[bool] = None,
    ) -> List[Project]:
        """프로젝트 생성"""
        require_field("id", project_id)
        require_field("title", title)

        if allow_duplicate_ids is None:
            allow_duplicate_ids = config.get("store", "allow_duplicate_ids", True)

        if store.exists(project_id):
            if not allow_duplicate_ids:
                raise DuplicateProjectError(project_id)
            logger.warning(f"Duplicate project id accepted, lookups resolve to the first: {project_id}")

        store.add(Project(id=project_id, title=title, tasks=[]))
        logger.info(f"Project created: {project_id}")
        return store.all()

    @staticmethod
    def add_task(store: ProjectStore, project_id: str, title: str) -> List[Project]:
        """프로젝트에 태스크 추가"""
        project = ProjectService.get_project(store, project_id)
        require_field("title", title)

        project.tasks.append(title)
        logger.info(f"Task added to project {project_id}: {title}")
        return store.all()

    @staticmethod
    def rename_project(store: ProjectStore, project_id: str, title: str) -> List[Project]:
        """프로젝트 제목 수정 (id, tasks 는 유지)"""
        project = ProjectService.get_project(store, project_id)
        require_field("title", title)

        project.title = title
        logger.info(f"Project renamed: {project_id} -> {title}")
        return store.all()

    @staticmethod
    def delete_project(store: ProjectStore, project_id: str) -> None:
        """프로젝트 삭제 (첫 번째 일치 항목만)"""
        removed = store.remove(project_id)
        if removed is None:
            raise ProjectNotFoundError(project_id)
        logger.info(f"Project deleted: {project_id}")
