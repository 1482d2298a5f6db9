
import math

from fastapi import Query

from taskboard.config import Config


class Pagination:
    def __init__(self,
                 page: int = Query(Config.default_page, ge=1),
                 limit: int = Query(Config.default_page_size, ge=1, le=Config.max_page_size)
                 ):
        self.page = page
        self.limit = limit

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)
