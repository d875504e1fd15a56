"""
Error values returned by HubSpot CRM operations.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error structure returned by the HubSpot API.

    An empty instance is the "no error" value and is falsy; any populated
    field makes it truthy.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    category: str = ""
    correlation_id: str = Field(default="", alias="correlationId")
    links: Optional[Dict[str, Any]] = None
    message: str = ""
    status: str = ""
    status_code: int = Field(default=0, alias="statusCode")
    sub_category: Any = Field(default=None, alias="subCategory")
    context: Optional[Dict[str, Any]] = None

    def __bool__(self) -> bool:
        return bool(self.status or self.status_code or self.message or self.category)

    def __str__(self) -> str:
        return self.message


class AssociationErrorResponse(BaseModel):
    """Error returned when associating two objects fails.

    HubSpot reports one item in ``errors`` per invalid side of the
    association, so a doubly invalid association carries two.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: str = ""
    status_code: int = Field(default=0, alias="statusCode")
    message: str = ""
    num_errors: int = Field(default=0, alias="numErrors")
    errors: List[ErrorResponse] = Field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.status or self.status_code or self.message or self.errors)

    def __str__(self) -> str:
        if self.message:
            return self.message
        return "; ".join(e.message for e in self.errors)
