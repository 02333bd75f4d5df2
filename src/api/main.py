import os

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.exceptions import ProjectHubException
from src.api.logging_config import logger, setup_logging
from src.api.routes import projects
from src.api.services.store import ProjectStore
from src.config import config

# 로깅 설정 초기화
setup_logging()

app = FastAPI(
    title="ProjectHub API", description="ProjectHub - 인메모리 프로젝트/태스크 관리 API", version="1.0.0"
)

# 프로세스 수명 동안 유지되는 저장소와 요청 카운터
app.state.store = ProjectStore()
app.state.request_count = 0

# Gzip 압축 미들웨어 추가
app.add_middleware(GZipMiddleware, minimum_size=1000)

# Prometheus 모니터링 초기화 (테스트 환경 제외)
if os.getenv("APP_ENV") != "test":
    Instrumentator().instrument(app).expose(app)
    logger.info("Prometheus Instrumentator initialized")


@app.exception_handler(ProjectHubException)
async def projecthub_exception_handler(request: Request, exc: ProjectHubException):
    logger.warning(f"Rejected request {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        # 정수 loc 은 JSON 디코딩 오류의 문자 위치
        location = ".".join(part for part in first.get("loc", ()) if isinstance(part, str) and part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "잘못된 요청입니다."
    logger.warning(f"Rejected request {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


# 라우터 포함
app.include_router(projects.router, prefix="/projects", tags=["projects"])

# CORS 설정
allowed_origins_raw = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:8000")
origins = [origin.strip() for origin in allowed_origins_raw.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request, call_next):
    logger.info(f"Request: {request.method} {request.url}")
    response = await call_next(request)
    logger.info(f"Response: {response.status_code}")
    return response


# 지금까지 처리한 전체 요청 수 (관측용, 동작에는 영향 없음)
@app.middleware("http")
async def count_requests(request: Request, call_next):
    request.app.state.request_count += 1
    logger.info(f"Total of requests: {request.app.state.request_count}")
    return await call_next(request)


@app.get("/health")
def health_check():
    return {"status": "ok"}


def run():
    """uvicorn 으로 API 서버 실행"""
    host = config.get("server", "host", "0.0.0.0")
    port = int(config.get("server", "port", 3000))
    logger.info(f"Starting ProjectHub API on {host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
