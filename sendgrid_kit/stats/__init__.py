from sendgrid_kit.stats.fetcher import Aggregation, StatisticFetcher
from sendgrid_kit.stats.requests import (
    CategoryStatisticGet,
    GlobalStatisticGet,
    SubuserStatisticGet,
)

__all__ = [
    "Aggregation",
    "CategoryStatisticGet",
    "GlobalStatisticGet",
    "StatisticFetcher",
    "SubuserStatisticGet",
]
