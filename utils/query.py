import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from utils.errors import InvalidInputError

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class ClauseResult:
    set_clause: str
    values: tuple[Any, ...]


@dataclass(frozen=True)
class FilterQuery:
    where_clause: str
    parameters: tuple[Any, ...]


def _pairs(update_fields: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> list[tuple[str, Any]]:
    if isinstance(update_fields, Mapping):
        return list(update_fields.items())
    return list(update_fields)


def build_set_clause(
    update_fields: Mapping[str, Any] | Iterable[tuple[str, Any]],
    column_map: Mapping[str, str],
    *,
    start: int = 1,
) -> ClauseResult:
    """
    부분 수정(PATCH)용 UPDATE SET 절 생성.

    Args:
        update_fields: 수정할 필드와 값 {"name": "Bauer-Gallagher", "numEmployees": 862}
            (순서대로 플레이스홀더 번호가 매겨짐)
        column_map: 필드명 -> DB 컬럼 매핑 {"numEmployees": "num_employees"}
            매핑에 없는 필드는 필드명을 그대로 컬럼명으로 사용

    Returns:
        ClauseResult
        - set_clause: '"name"=$1, "num_employees"=$2'
        - values: ("Bauer-Gallagher", 862)

    Raises:
        InvalidInputError: 수정할 필드가 없을 때
        ValueError: 컬럼명이 SQL 식별자 형식이 아닐 때

    Example:
        >>> result = build_set_clause({"name": "Acme", "logoUrl": None}, {"logoUrl": "logo_url"})
        >>> result.set_clause
        '"name"=$1, "logo_url"=$2'
        >>> result.values
        ('Acme', None)
    """
    pairs = _pairs(update_fields)
    if not pairs:
        raise InvalidInputError("No data")

    set_parts = []
    values = []
    for idx, (field_name, value) in enumerate(pairs, start=start):
        column_name = column_map.get(field_name, field_name)
        # 컬럼명은 SQL에 직접 들어가므로 식별자 형식만 허용, 값은 항상 바인딩
        if not _IDENTIFIER.match(column_name):
            raise ValueError(f"Invalid column name: {column_name!r}")
        set_parts.append(f'"{column_name}"=${idx}')
        values.append(value)

    return ClauseResult(set_clause=", ".join(set_parts), values=tuple(values))


@dataclass
class WhereClauseBuilder:
    """
    선택적 검색 조건을 순서대로 쌓아 WHERE 절을 만든다.

    조건마다 플레이스홀더 번호를 직접 계산하지 않고, 빌더가 누적 번호를 관리한다.
    조각(fragment)에는 값 대신 `{}` 자리만 두고, add()가 `$n`으로 채운다.

        >>> query = (
        ...     WhereClauseBuilder()
        ...     .add("(title LIKE {} OR title LIKE {})", "%Dev%", "%dev%")
        ...     .add("salary > {}", 50000)
        ...     .add("equity > 0")
        ...     .build()
        ... )
        >>> query.where_clause
        'WHERE (title LIKE $1 OR title LIKE $2) AND salary > $3 AND equity > 0'
    """
    start: int = 1
    _fragments: list[str] = field(default_factory=list, init=False)
    _parameters: list[Any] = field(default_factory=list, init=False)

    @property
    def next_index(self) -> int:
        return self.start + len(self._parameters)

    def add(self, fragment: str, *values: Any) -> "WhereClauseBuilder":
        slots = fragment.count("{}")
        if slots != len(values):
            raise ValueError(
                f"Fragment has {slots} placeholder(s) but {len(values)} value(s): {fragment!r}"
            )
        first = self.next_index
        placeholders = [f"${first + i}" for i in range(slots)]
        self._fragments.append(fragment.format(*placeholders))
        self._parameters.extend(values)
        return self

    def build(self) -> FilterQuery:
        if not self._fragments:
            return FilterQuery(where_clause="", parameters=())
        return FilterQuery(
            where_clause="WHERE " + " AND ".join(self._fragments),
            parameters=tuple(self._parameters),
        )
