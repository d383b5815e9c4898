from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, Optional

class OrderRequest(BaseModel):
    """
    Incoming order/quote request.

    Nothing is strictly validated: unknown fields are ignored, scalar values
    for text fields are stringified, and blanks become None.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    material: Optional[str] = None
    infill: Optional[str] = None
    quality: Optional[str] = None
    weight: Any = None
    color: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    number: Optional[str] = Field(None, description="Customer phone number")
    file_url: Optional[str] = Field(None, alias="fileUrl")
    file_path: Optional[str] = Field(None, alias="filePath")
    s3_key: Optional[str] = Field(None, alias="s3Key")
    save: Any = False

    @model_validator(mode="before")
    @classmethod
    def non_object_body_is_empty(cls, data: Any) -> Any:
        # Plain-text, form or array bodies carry no order fields
        if isinstance(data, (dict, cls)):
            return data
        return {}

    @field_validator(
        "material", "infill", "quality", "color", "name", "email", "number",
        "file_url", "file_path", "s3_key",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, value: Any) -> Optional[str]:
        if value is None or value is False:
            return None
        if isinstance(value, (dict, list)):
            return None
        text = str(value)
        return text if text != "" else None

    @property
    def should_save(self) -> bool:
        return bool(self.save)

class OrderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    weight: str
    cost_usd: str = Field(..., alias="costUSD")
    cost_inr: str = Field(..., alias="costINR")
    order_id: Optional[int] = Field(None, alias="orderId")
    message: Optional[str] = None
