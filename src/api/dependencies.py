"""
FastAPI 의존성 함수들

핸들러 실행 전에 저장소 주입, 프로젝트 존재 여부, 필수 필드를 순서대로 검증한다.
"""
from typing import Optional

from fastapi import Body, Depends, Request

from src.api.schemas.project import Project, ProjectCreate, ProjectTitle
from src.api.services.project_service import ProjectService, require_field
from src.api.services.store import ProjectStore


def get_store(request: Request) -> ProjectStore:
    """
    앱이 소유한 프로젝트 저장소 가져오기

    테스트에서는 app.dependency_overrides 로 독립된 저장소를 주입한다.
    """
    return request.app.state.store


def get_existing_project(project_id: str, store: ProjectStore = Depends(get_store)) -> Project:
    """
    경로의 id 와 처음 일치하는 프로젝트 가져오기

    Raises:
        ProjectNotFoundError: 일치하는 프로젝트가 없을 때 400 에러
    """
    return ProjectService.get_project(store, project_id)


def valid_project_create(payload: Optional[ProjectCreate] = Body(None)) -> ProjectCreate:
    """
    프로젝트 생성 본문 검증 (id, title 순서)

    Raises:
        MissingFieldError: id 또는 title 이 없거나 비어 있을 때 400 에러
    """
    payload = payload or ProjectCreate()
    require_field("id", payload.id)
    require_field("title", payload.title)
    return payload


def valid_title(payload: Optional[ProjectTitle] = Body(None)) -> ProjectTitle:
    """title 하나만 받는 본문 검증"""
    payload = payload or ProjectTitle()
    require_field("title", payload.title)
    return payload
