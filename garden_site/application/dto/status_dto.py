"""
Status DTO
==========
"""
from typing import Literal

from garden_site.application.dto.base_dto import ApiModel


class StatusResponse(ApiModel):
    """DTO for the liveness/connectivity probe."""
    status: str
    storage: Literal["memory", "mongodb"]
    database: Literal["connected", "disconnected", "in-memory"]
