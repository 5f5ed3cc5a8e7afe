"""
Request-side pagination schema.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class PageRequest(BaseModel):
    """
    Page indicator read from the request.

    requested_page is None when the ?id= parameter is missing, empty or
    not an integer.
    """

    model_config = ConfigDict(frozen=True)

    requested_page: Optional[int] = None
