from typing import Annotated

from fastapi import APIRouter, Query, status

from repositories import jobs as jobs_repo
from schemas.commons import DeletedResponse, JobId
from schemas.job import (
    JobCreateRequest,
    JobListResponse,
    JobResponse,
    JobSearchQuery,
    JobUpdateRequest,
)
from utils.auth import AdminUser

router = APIRouter(
    tags=["JOBS"],
)


@router.post("/jobs", response_model=JobResponse,
             status_code=status.HTTP_201_CREATED)
async def create_job(_admin: AdminUser, job: JobCreateRequest) -> JobResponse:
    """채용공고 생성 (관리자)"""
    new_job = await jobs_repo.create(**job.model_dump())
    return JobResponse(job=new_job)


@router.get("/jobs", response_model=JobListResponse)
async def get_jobs(query: Annotated[JobSearchQuery, Query()]) -> JobListResponse:
    """
    채용공고 목록 조회
    - title: 제목 부분 일치
    - minSalary: 연봉 하한 (초과)
    - hasEquity: true면 지분 있는 공고만
    """
    jobs = await jobs_repo.find_all(**query.model_dump(exclude_none=True))
    return JobListResponse(jobs=jobs)


@router.get("/jobs/{job_id}", response_model=JobResponse)
async def get_single_job(job_id: JobId) -> JobResponse:
    """채용공고 상세 조회"""
    job = await jobs_repo.get(job_id)
    return JobResponse(job=job)


@router.patch("/jobs/{job_id}", response_model=JobResponse)
async def update_job(_admin: AdminUser, job_id: JobId, update_data: JobUpdateRequest) -> JobResponse:
    """채용공고 수정 (관리자, 보낸 필드만 변경)"""
    update_fields = update_data.model_dump(exclude_unset=True)
    job = await jobs_repo.update(job_id, update_fields)
    return JobResponse(job=job)


@router.delete("/jobs/{job_id}", response_model=DeletedResponse)
async def delete_job(_admin: AdminUser, job_id: JobId) -> DeletedResponse:
    """채용공고 삭제 (관리자)"""
    await jobs_repo.remove(job_id)
    return DeletedResponse(deleted=str(job_id))
