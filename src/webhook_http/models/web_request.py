from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class WebRequestData(BaseModel, Generic[T]):
    """The two inputs a forwarded call can carry.

    GET and DELETE calls use ``query_params``; POST and PUT calls use
    ``payload``.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
    )

    query_params: Optional[str] = Field(default=None, alias="queryParams")
    payload: Optional[T] = None
