from fastapi import status


class AppError(Exception):
    """요청 처리 중 발생하는 도메인 에러 (main.py 핸들러가 HTTP 응답으로 변환)"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(AppError):
    """빈 수정 데이터, 잘못된 필터 조합 등"""
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
