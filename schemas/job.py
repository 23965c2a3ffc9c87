from pydantic import BaseModel, ConfigDict, Field, model_validator

from schemas.commons import CompanyHandle, Equity, Salary, Title


class Job(BaseModel):
    """채용공고 (equity는 NUMERIC 정밀도 유지를 위해 문자열)"""
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None
    company_handle: str


class JobSummary(BaseModel):
    """회사 상세 조회에 포함되는 채용공고"""
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None


class JobCreateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    title: Title
    salary: Salary | None = None
    equity: Equity | None = None
    company_handle: CompanyHandle


class JobUpdateRequest(BaseModel):
    """id, company_handle은 수정 불가 (extra='forbid'로 거부)"""
    model_config = ConfigDict(extra='forbid')

    title: Title | None = None
    salary: Salary | None = None
    equity: Equity | None = None

    @model_validator(mode='after')
    def title_not_null(self):
        # salary/equity는 null로 비울 수 있지만 title은 NOT NULL 컬럼
        if "title" in self.model_fields_set and self.title is None:
            raise ValueError("title은 null로 설정할 수 없습니다.")
        return self


class JobSearchQuery(BaseModel):
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    title: Title | None = None
    min_salary: Salary | None = Field(default=None, alias="minSalary")
    has_equity: bool | None = Field(default=None, alias="hasEquity")


class JobResponse(BaseModel):
    job: Job


class JobListResponse(BaseModel):
    jobs: list[Job]
