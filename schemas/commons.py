from decimal import Decimal
from typing import Annotated

from fastapi import Path
from pydantic import Field, BaseModel, StringConstraints

HANDLE_PATTERN = r"^[a-z0-9-]+$"

JobId = Annotated[
    int,
    Path(ge=1, description="채용공고 ID", examples=[1]),
]

CompanyHandle = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=1,
        max_length=25,
        pattern=HANDLE_PATTERN,
    ),
    Field(description="회사 핸들 (소문자, 숫자, -)", examples=["bauer-gallagher"]),
]

HandlePath = Annotated[
    str,
    Path(min_length=1, max_length=25, pattern=HANDLE_PATTERN, description="회사 핸들"),
]

Title = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=255),
]

Salary = Annotated[int, Field(ge=0)]

# 0 ~ 1 사이 지분율, DB에는 NUMERIC으로 저장
Equity = Annotated[Decimal, Field(ge=0, le=1)]

Count = Annotated[int, Field(ge=0)]


class DeletedResponse(BaseModel):
    deleted: str
