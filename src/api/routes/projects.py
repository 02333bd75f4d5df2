from typing import List

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_existing_project, get_store, valid_project_create, valid_title
from src.api.schemas.project import ErrorResponse, Project, ProjectCreate, ProjectTitle
from src.api.services.project_service import ProjectService
from src.api.services.store import ProjectStore

router = APIRouter(responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}})


@router.get("", response_model=List[Project])
def list_projects(store: ProjectStore = Depends(get_store)):
    """모든 프로젝트와 태스크 목록"""
    return ProjectService.list_projects(store)


@router.post("", response_model=List[Project])
def create_project(
    payload: ProjectCreate = Depends(valid_project_create),
    store: ProjectStore = Depends(get_store),
):
    """{id, title} 로 새 프로젝트를 등록하고 전체 목록 반환"""
    return ProjectService.create_project(store, payload.id, payload.title)


@router.post("/{project_id}/tasks", response_model=List[Project])
def add_task(
    project: Project = Depends(get_existing_project),
    payload: ProjectTitle = Depends(valid_title),
    store: ProjectStore = Depends(get_store),
):
    """프로젝트의 태스크 목록 끝에 {title} 추가"""
    return ProjectService.add_task(store, project.id, payload.title)


@router.put("/{project_id}", response_model=List[Project])
def rename_project(
    project: Project = Depends(get_existing_project),
    payload: ProjectTitle = Depends(valid_title),
    store: ProjectStore = Depends(get_store),
):
    """프로젝트 제목만 변경"""
    return ProjectService.rename_project(store, project.id, payload.title)


@router.delete("/{project_id}")
def delete_project(
    project: Project = Depends(get_existing_project),
    store: ProjectStore = Depends(get_store),
):
    """프로젝트 삭제, 빈 본문으로 응답"""
    ProjectService.delete_project(store, project.id)
    return Response(status_code=status.HTTP_200_OK)
