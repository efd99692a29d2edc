"""Site settings schemas."""
from .base import BaseSchema


class UpdateResult(BaseSchema):
    success: bool
