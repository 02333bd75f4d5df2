from typing import List, Optional

from pydantic import BaseModel, Field


class Project(BaseModel):
    id: str = Field(..., example="1")
    title: str = Field(..., example="Novo projeto")
    tasks: List[str] = Field(default_factory=list, example=["Nova tarefa"])


# 요청 본문: 필수 여부는 dependencies 의 검증 함수가 판단 (누락 시 400)
class ProjectCreate(BaseModel):
    id: Optional[str] = Field(None, example="1")
    title: Optional[str] = Field(None, example="Novo projeto")


class ProjectTitle(BaseModel):
    title: Optional[str] = Field(None, example="Nova tarefa")


class ErrorResponse(BaseModel):
    error: str = Field(..., example="프로젝트가 존재하지 않습니다. 유효하지 않은 id 입니다.")
