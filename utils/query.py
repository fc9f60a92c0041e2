from typing import Any, Mapping, NamedTuple


class InvalidArgumentError(ValueError):
    """쿼리를 만들 수 없는 입력 (예: 빈 업데이트)"""


class PartialUpdate(NamedTuple):
    set_clause: str
    values: list[Any]


class WhereClause(NamedTuple):
    clause: str
    values: list[Any]


def sql_for_partial_update(
    update_fields: Mapping[str, Any],
    column_map: Mapping[str, str]
) -> PartialUpdate:
    """
    부분 업데이트용 UPDATE SET 절 생성.

    update_fields의 순회 순서(dict 삽입 순서)대로 $1, $2, ... 를 부여한다.
    column_map에 없는 필드는 필드명을 그대로 컬럼명으로 사용한다.

    Args:
        update_fields: 업데이트할 필드와 값 {"numEmployees": 10, ...}
        column_map: 필드 -> DB 컬럼 매핑 {"numEmployees": "num_employees"}

    Returns:
        PartialUpdate(set_clause, values)
        - set_clause: '"num_employees" = $1,"name" = $2'
        - values: [10, "Acme"]  (set_clause의 placeholder 순서와 동일)

    Raises:
        InvalidArgumentError: update_fields가 비어 있을 때

    Example:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        PartialUpdate(set_clause='"first_name" = $1,"age" = $2', values=['Aliya', 32])
    """
    if not update_fields:
        raise InvalidArgumentError("No data supplied")

    set_parts = []
    for idx, field_name in enumerate(update_fields, start=1):
        if field_name in column_map:
            column_name = column_map[field_name]
        else:
            column_name = field_name
        set_parts.append(f'"{column_name}" = ${idx}')

    # 값은 절대 SQL 문자열에 넣지 않는다 - 드라이버가 위치 기반으로 바인딩
    return PartialUpdate(",".join(set_parts), list(update_fields.values()))


def contains_pattern(term: str) -> str:
    """
    부분 일치용 LIKE 패턴. 검색어의 \\, %, _ 는 문자 그대로 매칭된다.
    조건에는 ESCAPE '\\' 를 함께 써야 한다.

    >>> contains_pattern("a_c")
    '%a\\\\_c%'
    """
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class FilterBuilder:
    """
    WHERE 절 조건을 모아 $N placeholder와 값 리스트를 만든다.

    >>> builder = FilterBuilder()
    >>> builder.add("title ILIKE {}", "%dev%")
    >>> builder.add_raw("equity > 0")
    >>> builder.build()
    WhereClause(clause='WHERE title ILIKE $1 AND equity > 0', values=['%dev%'])
    """

    def __init__(self) -> None:
        self.conditions: list[str] = []
        self.values: list[Any] = []

    def add(self, template: str, value: Any) -> None:
        """값을 바인딩하는 조건 추가 (template의 {} 자리에 placeholder)"""
        self.values.append(value)
        self.conditions.append(template.format(f"${len(self.values)}"))

    def add_raw(self, condition: str) -> None:
        """바인딩할 값이 없는 조건 추가"""
        self.conditions.append(condition)

    def build(self) -> WhereClause:
        if not self.conditions:
            return WhereClause("", [])
        return WhereClause("WHERE " + " AND ".join(self.conditions), list(self.values))
