"""
Pydantic models for the AdMachin library tables.

These models validate rows coming back from Supabase before the ad creator
touches them:
- Creative (image/video media in the creatives bucket)
- AdCopy (headline, primary text or description)
- Project / Subproject (scope for filtering and for created ads)
- AdRecord (row written to the ads table)
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================

class CreativeType(str, Enum):
    """Media kind of a creative"""
    IMAGE = "image"
    VIDEO = "video"


class CopyType(str, Enum):
    """Ad copy slot a text belongs to"""
    HEADLINE = "headline"
    PRIMARY_TEXT = "primary_text"
    DESCRIPTION = "description"


# ============================================================================
# Library Models
# ============================================================================

class Creative(BaseModel):
    """Uploaded image or video creative."""
    id: str = Field(..., description="Creative UUID")
    name: str = Field(..., description="Display name")
    type: CreativeType = Field(..., description="image or video")
    storage_path: str = Field(..., description="Path inside the creatives bucket")
    file_size: int = Field(default=0, ge=0, description="Size in bytes")
    dimensions: Optional[Dict[str, Any]] = Field(None, description="width/height, or thumbnail for videos")
    duration: Optional[float] = Field(None, ge=0, description="Video duration in seconds")
    uploaded_by: Optional[str] = None
    user_id: Optional[str] = None
    project_id: Optional[str] = None
    subproject_id: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def thumbnail_path(self) -> Optional[str]:
        """Storage path of a video's thumbnail, if one was generated."""
        if self.dimensions and isinstance(self.dimensions.get("thumbnail"), str):
            return self.dimensions["thumbnail"]
        return None


class AdCopy(BaseModel):
    """Headline, primary text or description."""
    id: str = Field(..., description="Ad copy UUID")
    text: Optional[str] = Field(None, description="Copy text")
    type: CopyType = Field(..., description="Which ad slot the copy fills")
    name: Optional[str] = None
    user_id: Optional[str] = None
    project_id: Optional[str] = None
    subproject_id: Optional[str] = None
    created_at: Optional[datetime] = None


class Project(BaseModel):
    id: str
    name: str
    created_at: Optional[datetime] = None


class Subproject(BaseModel):
    id: str
    name: str
    project_id: Optional[str] = None
    created_at: Optional[datetime] = None


class AdRecord(BaseModel):
    """Row inserted into the ads table for one committed combination."""
    creative_id: str
    headline_id: str
    primary_id: str
    description_id: str
    user_id: Optional[str] = None
    project_id: Optional[str] = None
    subproject_id: Optional[str] = None
