# app/routers/software_engineers.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from app.schemas import SoftwareEngineer, SoftwareEngineerInput
from app.exceptions import InvalidInput, NotFound, GenerationFailure
from app.deps import get_software_engineer_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/software-engineers", tags=["software-engineers"])

ERROR_RESPONSES = {
    400: {
        "description": "잘못된 입력",
        "content": {"application/json": {"example": {"detail": "id must not be None"}}}
    },
    404: {
        "description": "해당 id 의 엔지니어 없음",
        "content": {"application/json": {"example": {"detail": "software engineer with id 5 not found"}}}
    },
    500: {"description": "서버 내부 오류"},
}


def _to_http(e: Exception) -> HTTPException:
    if isinstance(e, InvalidInput):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, NotFound):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, GenerationFailure):
        return HTTPException(status_code=502, detail=str(e))
    logger.error("Unhandled error", exc_info=e)
    return HTTPException(status_code=500, detail="Internal server error")


@router.get(
    "",
    response_model=List[SoftwareEngineer],
    summary="전체 엔지니어 조회",
)
def get_engineers(svc=Depends(get_software_engineer_service)):
    try:
        return list(svc.get_all())
    except Exception as e:
        raise _to_http(e) from e


@router.post(
    "",
    response_model=SoftwareEngineer,
    status_code=201,
    summary="엔지니어 등록 + 학습 경로 추천 생성",
    responses={
        **ERROR_RESPONSES,
        502: {
            "description": "LLM 추천 생성 실패 (저장되지 않음)",
            "content": {"application/json": {"example": {"detail": "chat backend call failed: Connection error."}}}
        },
    },
)
def new_software_engineer(
    payload: SoftwareEngineerInput,
    svc=Depends(get_software_engineer_service),
):
    # 요청 본문의 id, learningPathRecommendation 은 사용하지 않음
    record = SoftwareEngineer(name=payload.name, techStack=payload.techStack)
    try:
        return svc.insert(record)
    except Exception as e:
        raise _to_http(e) from e


@router.get(
    "/{engineer_id}",
    response_model=SoftwareEngineer,
    summary="id 로 엔지니어 조회",
    responses=ERROR_RESPONSES,
)
def get_engineer_by_id(engineer_id: int, svc=Depends(get_software_engineer_service)):
    try:
        return svc.get_by_id(engineer_id)
    except Exception as e:
        raise _to_http(e) from e


@router.delete(
    "/{engineer_id}",
    status_code=204,
    response_class=Response,
    summary="엔지니어 삭제 (없는 id 도 성공)",
    responses=ERROR_RESPONSES,
)
def delete_engineer_by_id(engineer_id: int, svc=Depends(get_software_engineer_service)):
    try:
        svc.delete_by_id(engineer_id)
    except Exception as e:
        raise _to_http(e) from e
    return Response(status_code=204)


@router.put(
    "/{engineer_id}",
    status_code=204,
    response_class=Response,
    summary="엔지니어 name, techStack 수정",
    responses=ERROR_RESPONSES,
)
def update_software_engineer(
    engineer_id: int,
    payload: SoftwareEngineerInput,
    svc=Depends(get_software_engineer_service),
):
    try:
        svc.update(engineer_id, SoftwareEngineer(name=payload.name, techStack=payload.techStack))
    except Exception as e:
        raise _to_http(e) from e
    return Response(status_code=204)
