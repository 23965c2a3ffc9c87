from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, model_validator
from pydantic.alias_generators import to_camel

from schemas.commons import CompanyHandle, Count
from schemas.job import JobSummary

Name = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=255),
]

Description = Annotated[str, StringConstraints(strip_whitespace=True)]

LogoUrl = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]


class CamelModel(BaseModel):
    """JSON은 camelCase (numEmployees, logoUrl), 파이썬에서는 snake_case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Company(CamelModel):
    handle: str
    name: str
    description: str
    num_employees: int | None = None
    logo_url: str | None = None


class CompanyDetail(Company):
    jobs: list[JobSummary] = []


class CompanyCreateRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    handle: CompanyHandle
    name: Name
    description: Description
    num_employees: Count | None = None
    logo_url: LogoUrl | None = None


class CompanyUpdateRequest(CamelModel):
    """handle은 수정 불가"""
    model_config = ConfigDict(extra='forbid')

    name: Name | None = None
    description: Description | None = None
    num_employees: Count | None = None
    logo_url: LogoUrl | None = None

    @model_validator(mode='after')
    def required_columns_not_null(self):
        for field_name in ("name", "description"):
            if field_name in self.model_fields_set and getattr(self, field_name) is None:
                raise ValueError(f"{field_name}은 null로 설정할 수 없습니다.")
        return self


class CompanySearchQuery(CamelModel):
    model_config = ConfigDict(extra='forbid')

    name_like: Name | None = None
    min_employees: Count | None = None
    max_employees: Count | None = None


class CompanyResponse(BaseModel):
    company: Company


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: list[Company]
