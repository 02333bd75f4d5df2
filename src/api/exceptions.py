from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class ProjectHubException(HTTPException):
    """ProjectHub 전용 기본 예외 클래스"""

    def __init__(
        self,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        detail: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class MissingFieldError(ProjectHubException):
    """필수 필드가 없거나 비어 있을 때"""

    def __init__(self, field: str, detail: Optional[str] = None):
        self.field = field
        super().__init__(detail=detail or f"필수 필드 '{field}' 가 누락되었습니다.")


class ProjectNotFoundError(ProjectHubException):
    """프로젝트를 찾을 수 없을 때"""

    def __init__(self, project_id: Optional[str] = None, detail: Optional[str] = None):
        self.project_id = project_id
        super().__init__(detail=detail or "프로젝트가 존재하지 않습니다. 유효하지 않은 id 입니다.")


class DuplicateProjectError(ProjectHubException):
    """중복 id 가 허용되지 않는 설정에서 이미 존재하는 id 로 생성할 때"""

    def __init__(self, project_id: str, detail: Optional[str] = None):
        self.project_id = project_id
        super().__init__(detail=detail or f"id '{project_id}' 프로젝트가 이미 존재합니다.")
