from datetime import date
from typing import Any

from sendgrid_kit.constants import (
    CATEGORY_STATS_PATH,
    GLOBAL_STATS_PATH,
    MAX_STATS_FILTERS,
    SUBUSER_STATS_PATH,
)
from sendgrid_kit.exceptions import InvalidCategoriesError, InvalidSubusersError
from sendgrid_kit.stats.fetcher import Aggregation, StatisticFetcher


class GlobalStatisticGet(StatisticFetcher):
    """Get Global Stats API (GET /v3/stats)"""

    @property
    def path(self) -> str:
        return GLOBAL_STATS_PATH


class CategoryStatisticGet(StatisticFetcher):
    """Get Category Stats API (GET /v3/categories/stats)"""

    def __init__(
        self,
        categories: list[str],
        start_date: date,
        end_date: date | None = None,
        aggregated_by: Aggregation | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ):
        super().__init__(start_date, end_date, aggregated_by, limit, offset)
        self.categories = list(categories)

    @property
    def path(self) -> str:
        return CATEGORY_STATS_PATH

    def encode(self) -> dict[str, Any]:
        params = super().encode()
        params["categories"] = list(self.categories)
        return params

    def validate(self) -> None:
        super().validate()
        if not 0 < len(self.categories) <= MAX_STATS_FILTERS:
            raise InvalidCategoriesError(len(self.categories), MAX_STATS_FILTERS)


class SubuserStatisticGet(StatisticFetcher):
    """
    Get Subuser Stats API (GET /v3/subusers/stats)
    상위 계정 전용 API 라 대리 호출(on_behalf_of)을 지원하지 않습니다.
    """

    supports_impersonation = False

    def __init__(
        self,
        subusers: list[str],
        start_date: date,
        end_date: date | None = None,
        aggregated_by: Aggregation | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ):
        super().__init__(start_date, end_date, aggregated_by, limit, offset)
        self.subusers = list(subusers)

    @property
    def path(self) -> str:
        return SUBUSER_STATS_PATH

    def encode(self) -> dict[str, Any]:
        params = super().encode()
        params["subusers"] = list(self.subusers)
        return params

    def validate(self) -> None:
        super().validate()
        if not 0 < len(self.subusers) <= MAX_STATS_FILTERS:
            raise InvalidSubusersError(len(self.subusers), MAX_STATS_FILTERS)
