from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ErrorDescriptor(BaseModel):
    """Error envelope returned by backend services.

    Accepts the usual spellings for each field (``message``/``error``/``detail``
    and ``code``/``errorCode``); any other field is kept as an extra.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )

    message: str = Field(
        validation_alias=AliasChoices("message", "Message", "error", "detail")
    )
    code: Optional[Union[int, str]] = Field(
        default=None, validation_alias=AliasChoices("code", "Code", "errorCode")
    )
    details: Optional[Any] = Field(
        default=None, validation_alias=AliasChoices("details", "Details")
    )
