from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from schemas.commons import INT4_MAX, CompanyHandle, Count, JobId, Title

Equity = Annotated[Decimal, Field(ge=0, le=1)]


class JobItem(BaseModel):
    """회사 상세에 포함되는 채용공고"""
    model_config = ConfigDict(from_attributes=True)

    id: JobId
    title: Title
    salary: Count | None = None
    equity: Equity | None = None


class Job(JobItem):
    company_handle: CompanyHandle


class JobResponse(BaseModel):
    job: Job


class ListJobsResponse(BaseModel):
    jobs: list[Job]


class DeletedJobResponse(BaseModel):
    deleted: JobId


class ListJobsQuery(BaseModel):
    model_config = ConfigDict(extra='forbid')

    title: Annotated[
        str | None,
        Field(min_length=1, max_length=100, description="제목에 포함된 검색어 (대소문자 무시)")
    ] = None
    min_salary: Annotated[int | None, Field(ge=0, le=INT4_MAX, description="최소 연봉")] = None
    has_equity: Annotated[bool | None, Field(description="true면 equity > 0 인 공고만")] = None


class JobCreateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    title: Title
    salary: Count | None = None
    equity: Equity | None = None
    company_handle: CompanyHandle


class JobUpdateRequest(BaseModel):
    """
    부분 수정. 빈 body는 여기서 막지 않는다 (SET 절 생성 단계에서 400)
    """
    model_config = ConfigDict(extra='forbid')

    title: Title | None = None
    salary: Count | None = None
    equity: Equity | None = None

    @model_validator(mode='after')
    def check_title_not_null(self):
        if "title" in self.model_fields_set and self.title is None:
            raise ValueError("title은 null로 설정할 수 없습니다.")
        return self
