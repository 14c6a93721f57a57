from datetime import date, datetime
from enum import Enum
from typing import Any

from sendgrid_kit.constants import STATS_DATE_FORMAT
from sendgrid_kit.exceptions import InvalidEndDateError, InvalidQueryParameterError
from sendgrid_kit.request import HttpMethod, Request


class Aggregation(Enum):
    """통계 집계 단위"""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


def _as_date(value: date) -> date:
    # datetime 은 date 의 하위 클래스라 비교 전에 날짜만 남김
    return value.date() if isinstance(value, datetime) else value


class StatisticFetcher(Request):
    """
    통계 조회 API 의 공통 기본 클래스.
    기간/집계 단위/페이지네이션 쿼리 파라미터를 구성하며, 경로는 하위 클래스가 고정합니다.
    """

    method = HttpMethod.GET

    def __init__(
        self,
        start_date: date,
        end_date: date | None = None,
        aggregated_by: Aggregation | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ):
        self.start_date = _as_date(start_date)
        self.end_date = _as_date(end_date) if end_date is not None else None
        self.aggregated_by = aggregated_by
        self.limit = limit
        self.offset = offset

    def encode(self) -> dict[str, Any]:
        params: dict[str, Any] = {
            "start_date": self.start_date.strftime(STATS_DATE_FORMAT)
        }
        if self.end_date is not None:
            params["end_date"] = self.end_date.strftime(STATS_DATE_FORMAT)
        if self.aggregated_by is not None:
            params["aggregated_by"] = self.aggregated_by.value
        if self.limit is not None:
            params["limit"] = self.limit
        if self.offset is not None:
            params["offset"] = self.offset
        return params

    def validate(self) -> None:
        """
        쿼리 파라미터를 검증합니다.

        Raises:
            InvalidEndDateError: 종료일이 시작일보다 앞선 경우
            InvalidQueryParameterError: limit 또는 offset 이 음수인 경우
        """
        if self.end_date is not None and self.end_date < self.start_date:
            raise InvalidEndDateError(self.start_date, self.end_date)
        if self.limit is not None and self.limit < 0:
            raise InvalidQueryParameterError("limit", self.limit)
        if self.offset is not None and self.offset < 0:
            raise InvalidQueryParameterError("offset", self.offset)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.encode()!r})"
