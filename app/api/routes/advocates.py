from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.config import Settings
from app.dependencies import get_advocate_repo, get_settings
from app.repos import AdvocateRepo
from app.services import advocates as advocates_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/advocates", tags=["advocates"])

INTERNAL_ERROR = "Internal server error"

CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AdvocateOut(BaseModel):
    model_config = CAMEL_CONFIG

    id: int
    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: List[str]
    years_of_experience: int
    phone_number: int


class AdvocateListMeta(BaseModel):
    model_config = CAMEL_CONFIG

    page: int
    page_size: int
    total: int
    total_pages: int
    q: str


class AdvocateListResponse(BaseModel):
    data: List[AdvocateOut]
    meta: AdvocateListMeta


class ErrorResponse(BaseModel):
    error: str


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get(
    "",
    response_model=AdvocateListResponse,
    responses={500: {"model": ErrorResponse}},
)
def advocates_index(
    page: str | None = Query(default=None),
    page_size: str | None = Query(default=None, alias="pageSize"),
    q: str | None = Query(default=None),
    repo: AdvocateRepo = Depends(get_advocate_repo),
    settings: Settings = Depends(get_settings),
):
    request = advocates_service.page_request(
        page,
        page_size,
        q,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
    try:
        return advocates_service.list_advocates(repo, request)
    except Exception:  # noqa: BLE001
        logger.exception("advocate list query failed")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


@router.get(
    "/{advocate_id}",
    response_model=AdvocateOut,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def advocate_detail(advocate_id: str, repo: AdvocateRepo = Depends(get_advocate_repo)):
    try:
        return advocates_service.get_advocate(repo, advocate_id)
    except advocates_service.InvalidAdvocateId as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except advocates_service.AdvocateNotFound as exc:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))
    except Exception:  # noqa: BLE001
        logger.exception("advocate lookup failed for id=%r", advocate_id)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
