from datetime import datetime

from admin_api.schemas.base import BaseSchema


class HealthRead(BaseSchema):
    status: str
    database: str
    timestamp: datetime
