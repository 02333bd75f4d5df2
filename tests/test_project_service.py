import pytest

from src.api.exceptions import DuplicateProjectError, MissingFieldError, ProjectNotFoundError
from src.api.schemas.project import Project
from src.api.services.project_service import ProjectService, require_field
from src.api.services.store import ProjectStore


def test_store_first_match_lookup():
    """같은 id 가 여러 개면 첫 번째 항목을 찾음"""
    store = ProjectStore()
    first = store.add(Project(id="1", title="first"))
    store.add(Project(id="1", title="second"))

    assert store.find("1") is first
    assert store.index_of("1") == 0
    assert store.index_of("2") == -1
    assert store.find("2") is None


def test_store_remove_only_first():
    store = ProjectStore([Project(id="1", title="a"), Project(id="1", title="b")])

    removed = store.remove("1")
    assert removed.title == "a"
    assert [p.title for p in store.all()] == ["b"]
    assert store.remove("missing") is None


def test_require_field():
    assert require_field("title", "A") == "A"
    for value in (None, ""):
        with pytest.raises(MissingFieldError) as exc_info:
            require_field("title", value)
        assert exc_info.value.field == "title"
        assert exc_info.value.status_code == 400


def test_create_project_returns_store():
    store = ProjectStore()
    result = ProjectService.create_project(store, "1", "A")

    assert result is store.all()
    assert result == [Project(id="1", title="A", tasks=[])]


def test_create_project_missing_field_no_mutation():
    store = ProjectStore()
    with pytest.raises(MissingFieldError):
        ProjectService.create_project(store, "", "A")
    with pytest.raises(MissingFieldError):
        ProjectService.create_project(store, "1", None)
    assert len(store) == 0


def test_create_project_duplicates():
    store = ProjectStore()
    ProjectService.create_project(store, "1", "A", allow_duplicate_ids=True)
    ProjectService.create_project(store, "1", "B", allow_duplicate_ids=True)
    assert len(store) == 2

    with pytest.raises(DuplicateProjectError) as exc_info:
        ProjectService.create_project(store, "1", "C", allow_duplicate_ids=False)
    assert exc_info.value.project_id == "1"
    assert len(store) == 2


def test_add_task_only_touches_target():
    store = ProjectStore()
    ProjectService.create_project(store, "1", "A")
    ProjectService.create_project(store, "2", "B")

    ProjectService.add_task(store, "2", "t1")
    assert store.find("1").tasks == []
    assert store.find("2").tasks == ["t1"]


def test_add_task_not_found():
    store = ProjectStore()
    with pytest.raises(ProjectNotFoundError) as exc_info:
        ProjectService.add_task(store, "404", "t1")
    assert exc_info.value.project_id == "404"


def test_rename_project_preserves_id_and_tasks():
    store = ProjectStore()
    ProjectService.create_project(store, "1", "A")
    ProjectService.add_task(store, "1", "t1")

    ProjectService.rename_project(store, "1", "B")
    assert store.find("1") == Project(id="1", title="B", tasks=["t1"])

    with pytest.raises(MissingFieldError):
        ProjectService.rename_project(store, "1", "")
    assert store.find("1").title == "B"


def test_delete_project():
    store = ProjectStore()
    ProjectService.create_project(store, "1", "A")

    assert ProjectService.delete_project(store, "1") is None
    assert len(store) == 0
    with pytest.raises(ProjectNotFoundError):
        ProjectService.delete_project(store, "1")
