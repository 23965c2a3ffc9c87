from typing import Annotated

from fastapi import APIRouter, Query, status

from repositories import companies as companies_repo
from schemas.commons import DeletedResponse, HandlePath
from schemas.company import (
    CompanyCreateRequest,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanySearchQuery,
    CompanyUpdateRequest,
)
from utils.auth import AdminUser

router = APIRouter(
    tags=["COMPANIES"],
)


@router.post("/companies", response_model=CompanyResponse,
             status_code=status.HTTP_201_CREATED)
async def create_company(_admin: AdminUser, company: CompanyCreateRequest) -> CompanyResponse:
    """회사 생성 (관리자)"""
    new_company = await companies_repo.create(**company.model_dump())
    return CompanyResponse(company=new_company)


@router.get("/companies", response_model=CompanyListResponse)
async def get_companies(query: Annotated[CompanySearchQuery, Query()]) -> CompanyListResponse:
    """
    회사 목록 조회
    - nameLike: 이름 부분 일치 (대소문자 무시)
    - minEmployees / maxEmployees: 직원 수 범위
    """
    companies = await companies_repo.find_all(**query.model_dump(exclude_none=True))
    return CompanyListResponse(companies=companies)


@router.get("/companies/{handle}", response_model=CompanyDetailResponse)
async def get_single_company(handle: HandlePath) -> CompanyDetailResponse:
    """회사 상세 조회 (채용공고 포함)"""
    company = await companies_repo.get(handle)
    return CompanyDetailResponse(company=company)


@router.patch("/companies/{handle}", response_model=CompanyResponse)
async def update_company(
        _admin: AdminUser, handle: HandlePath, update_data: CompanyUpdateRequest) -> CompanyResponse:
    """회사 정보 수정 (관리자)"""
    # 요청 필드명(camelCase) 그대로 넘기고, 컬럼 매핑은 repository에서
    update_fields = update_data.model_dump(by_alias=True, exclude_unset=True)
    company = await companies_repo.update(handle, update_fields)
    return CompanyResponse(company=company)


@router.delete("/companies/{handle}", response_model=DeletedResponse)
async def delete_company(_admin: AdminUser, handle: HandlePath) -> DeletedResponse:
    """회사 삭제 (관리자, 소속 채용공고도 함께 삭제)"""
    await companies_repo.remove(handle)
    return DeletedResponse(deleted=handle)
