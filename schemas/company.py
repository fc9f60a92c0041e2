from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator, StringConstraints

from schemas.commons import INT4_MAX, CompanyHandle, Count, Description
from schemas.job import JobItem

CompanyName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

LogoUrl = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]


class Company(BaseModel):
    """API 필드명은 camelCase (numEmployees, logoUrl)"""
    model_config = ConfigDict(populate_by_name=True)

    handle: CompanyHandle
    name: CompanyName
    description: Description
    num_employees: Count | None = Field(default=None, alias="numEmployees")
    logo_url: LogoUrl | None = Field(default=None, alias="logoUrl")


class CompanyDetail(Company):
    jobs: list[JobItem] = []


class CompanyResponse(BaseModel):
    company: Company


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class ListCompaniesResponse(BaseModel):
    companies: list[Company]


class DeletedCompanyResponse(BaseModel):
    deleted: CompanyHandle


class ListCompaniesQuery(BaseModel):
    model_config = ConfigDict(extra='forbid')

    name: Annotated[str | None, Field(min_length=1, max_length=100)] = None
    min_employees: Annotated[int | None, Field(ge=0, le=INT4_MAX)] = None
    max_employees: Annotated[int | None, Field(ge=0, le=INT4_MAX)] = None


class CompanyCreateRequest(Company):
    model_config = ConfigDict(extra='forbid', populate_by_name=True)


class CompanyUpdateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    name: CompanyName | None = None
    description: Description | None = None
    num_employees: Count | None = Field(default=None, alias="numEmployees")
    logo_url: LogoUrl | None = Field(default=None, alias="logoUrl")

    @model_validator(mode='after')
    def check_not_null_fields(self):
        for field in ("name", "description"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field}은 null로 설정할 수 없습니다.")
        return self
