from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class UploadResponse(BaseModel):
    """Location of a stored model. Disk uploads carry filePath, S3 uploads carry s3Key."""
    model_config = ConfigDict(populate_by_name=True)

    file_url: str = Field(..., alias="fileUrl")
    file_path: Optional[str] = Field(None, alias="filePath")
    s3_key: Optional[str] = Field(None, alias="s3Key")
    original_name: str = Field(..., alias="originalName")
    success: bool = True
    storage: str = Field(..., description='"disk" or "s3"')

class PresignResponse(BaseModel):
    url: str
