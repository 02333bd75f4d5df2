"""
인메모리 프로젝트 저장소
"""

from typing import List, Optional

from src.api.schemas.project import Project


class ProjectStore:
    """삽입 순서를 유지하는 프로젝트 목록.

    보조 인덱스 없이 선형 탐색하며, 같은 id 가 여러 개면 항상 첫 번째 항목이 선택된다.
    프로세스 종료 시 내용은 사라진다.
    """

    def __init__(self, projects: Optional[List[Project]] = None):
        self._projects: List[Project] = list(projects or [])

    def __len__(self) -> int:
        return len(self._projects)

    def all(self) -> List[Project]:
        return self._projects

    def index_of(self, project_id: str) -> int:
        """첫 번째로 일치하는 프로젝트의 위치, 없으면 -1"""
        for index, project in enumerate(self._projects):
            if project.id == project_id:
                return index
        return -1

    def find(self, project_id: str) -> Optional[Project]:
        index = self.index_of(project_id)
        if index == -1:
            return None
        return self._projects[index]

    def exists(self, project_id: str) -> bool:
        return self.index_of(project_id) != -1

    def add(self, project: Project) -> Project:
        self._projects.append(project)
        return project

    def remove(self, project_id: str) -> Optional[Project]:
        index = self.index_of(project_id)
        if index == -1:
            return None
        return self._projects.pop(index)
