from typing import Optional

from sqlalchemy import Select


def paginate(stmt: Select, page: Optional[int] = None, limit: Optional[int] = None) -> Select:
    """
    Applies page/limit to a statement when both are given; returns it unchanged otherwise.

    Page numbers start at 1, so page `p` covers rows `(p - 1) * limit` to `p * limit - 1`.
    """
    if page and limit:
        return stmt.offset((page - 1) * limit).limit(limit)
    return stmt
