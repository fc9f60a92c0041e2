import asyncpg
from fastapi import APIRouter, Depends, status, HTTPException

from db.repositories import companies as company_repo
from schemas.commons import AdminUser, CompanyHandlePath, DBConnection
from schemas.company import (
    CompanyCreateRequest,
    CompanyDetailResponse,
    CompanyResponse,
    CompanyUpdateRequest,
    DeletedCompanyResponse,
    ListCompaniesQuery,
    ListCompaniesResponse,
)

router = APIRouter(
    prefix="/companies",
    tags=["COMPANIES"],
)


def company_not_found(handle: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No company: {handle}",
    )


@router.get("", response_model=ListCompaniesResponse)
async def get_companies(conn: DBConnection, query: ListCompaniesQuery = Depends()) -> ListCompaniesResponse:
    """회사 목록 (name 부분 일치, 직원 수 범위)"""
    if (query.min_employees is not None and query.max_employees is not None
            and query.min_employees > query.max_employees):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="min_employees cannot be greater than max_employees",
        )

    companies = await company_repo.find_all(
        conn,
        name=query.name,
        min_employees=query.min_employees,
        max_employees=query.max_employees,
    )
    return ListCompaniesResponse(companies=companies)


@router.post("", response_model=CompanyResponse,
             status_code=status.HTTP_201_CREATED)
async def create_company(
        _admin: AdminUser, company: CompanyCreateRequest, conn: DBConnection) -> CompanyResponse:
    """회사 생성 (관리자)"""
    try:
        new_company = await company_repo.create(conn, **company.model_dump())
    except asyncpg.UniqueViolationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Duplicate company: {company.handle}",
        )
    return CompanyResponse(company=new_company)


@router.get("/{handle}", response_model=CompanyDetailResponse)
async def get_company(handle: CompanyHandlePath, conn: DBConnection) -> CompanyDetailResponse:
    """회사 상세 (채용공고 포함)"""
    company = await company_repo.get(conn, handle)
    if company is None:
        raise company_not_found(handle)
    return CompanyDetailResponse(company=company)


@router.patch("/{handle}", response_model=CompanyResponse)
async def update_company(
        _admin: AdminUser, handle: CompanyHandlePath, update_data: CompanyUpdateRequest,
        conn: DBConnection) -> CompanyResponse:
    """회사 수정 (name, description, numEmployees, logoUrl 중 보낸 필드만)"""
    # API 필드명(camelCase) 그대로 넘기고 컬럼 매핑은 repository에서
    update_fields = update_data.model_dump(by_alias=True, exclude_unset=True)
    try:
        company = await company_repo.update(conn, handle, update_fields)
    except asyncpg.UniqueViolationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Duplicate company: {update_fields.get('name')}",
        )
    if company is None:
        raise company_not_found(handle)
    return CompanyResponse(company=company)


@router.delete("/{handle}", response_model=DeletedCompanyResponse)
async def delete_company(
        _admin: AdminUser, handle: CompanyHandlePath, conn: DBConnection) -> DeletedCompanyResponse:
    """회사 삭제 (소속 채용공고도 함께 삭제)"""
    deleted = await company_repo.remove(conn, handle)
    if deleted is None:
        raise company_not_found(handle)
    return DeletedCompanyResponse(deleted=deleted)
