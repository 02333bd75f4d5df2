import os
import sys

import pytest
from fastapi.testclient import TestClient

# 테스트 환경 설정
os.environ["APP_ENV"] = "test"

# 프로젝트 루트를 path에 추가
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.api.dependencies import get_store
from src.api.main import app
from src.api.services.store import ProjectStore
from src.config import config


@pytest.fixture
def store():
    # 테스트마다 독립된 빈 저장소
    return ProjectStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    del app.dependency_overrides[get_store]


@pytest.fixture
def no_duplicates():
    config.set("store", "allow_duplicate_ids", False)
    yield
    config.set("store", "allow_duplicate_ids", True)
