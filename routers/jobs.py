import asyncpg
from fastapi import APIRouter, Depends, status, HTTPException

from db.repositories import jobs as job_repo
from schemas.commons import AdminUser, DBConnection, JobIdPath
from schemas.job import (
    DeletedJobResponse,
    JobCreateRequest,
    JobResponse,
    JobUpdateRequest,
    ListJobsQuery,
    ListJobsResponse,
)

router = APIRouter(
    prefix="/jobs",
    tags=["JOBS"],
)


def job_not_found(job_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No job: {job_id}",
    )


def duplicate_job(title: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Duplicate job: {title}",
    )


@router.get("", response_model=ListJobsResponse)
async def get_jobs(conn: DBConnection, query: ListJobsQuery = Depends()) -> ListJobsResponse:
    """
    채용공고 목록
    - title: 부분 일치 (대소문자 무시)
    - min_salary: 최소 연봉
    - has_equity: true면 equity가 있는 공고만
    """
    jobs = await job_repo.find_all(
        conn,
        title=query.title,
        min_salary=query.min_salary,
        has_equity=query.has_equity,
    )
    return ListJobsResponse(jobs=jobs)


@router.post("", response_model=JobResponse,
             status_code=status.HTTP_201_CREATED)
async def create_job(_admin: AdminUser, job: JobCreateRequest, conn: DBConnection) -> JobResponse:
    """채용공고 생성 (관리자)"""
    if await job_repo.title_exists(conn, job.title):
        raise duplicate_job(job.title)

    try:
        new_job = await job_repo.create(conn, **job.model_dump())
    except asyncpg.ForeignKeyViolationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"No company: {job.company_handle}",
        )

    return JobResponse(job=new_job)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: JobIdPath, conn: DBConnection) -> JobResponse:
    """채용공고 상세"""
    job = await job_repo.get(conn, job_id)
    if job is None:
        raise job_not_found(job_id)
    return JobResponse(job=job)


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(
        _admin: AdminUser, job_id: JobIdPath, update_data: JobUpdateRequest, conn: DBConnection) -> JobResponse:
    """채용공고 수정 (title, salary, equity 중 보낸 필드만)"""
    update_fields = update_data.model_dump(exclude_unset=True)
    if "title" in update_fields and await job_repo.title_exists(conn, update_fields["title"], exclude_id=job_id):
        raise duplicate_job(update_fields["title"])

    job = await job_repo.update(conn, job_id, update_fields)
    if job is None:
        raise job_not_found(job_id)
    return JobResponse(job=job)


@router.delete("/{job_id}", response_model=DeletedJobResponse)
async def delete_job(_admin: AdminUser, job_id: JobIdPath, conn: DBConnection) -> DeletedJobResponse:
    """채용공고 삭제"""
    deleted_id = await job_repo.remove(conn, job_id)
    if deleted_id is None:
        raise job_not_found(job_id)
    return DeletedJobResponse(deleted=deleted_id)
