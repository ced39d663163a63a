"""
AdLibraryService - Supabase access for the ad creator.

Manages:
- Creative and ad copy retrieval (the four selection pools)
- Project / subproject lookup for scoping
- Public URLs for creatives in Supabase Storage
- Bulk creation of ad records from committed combinations
"""

import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from ..core.config import Config
from ..core.database import get_creatives_bucket, get_supabase_client
from .models import AdCopy, AdRecord, Creative, Project, Subproject

logger = logging.getLogger(__name__)


class AdLibraryService:
    """Service for ad library reads and ad creation"""

    def __init__(self, supabase: Optional[Client] = None):
        """Initialize with Supabase client"""
        self.supabase: Client = supabase or get_supabase_client()
        logger.info("AdLibraryService initialized")

    # ============================================
    # SELECTION POOLS
    # ============================================

    def get_creatives(self) -> List[Creative]:
        """
        Fetch all creatives, newest first.

        Returns:
            List of Creative models

        Raises:
            pydantic.ValidationError: If a row is malformed
        """
        result = self.supabase.table("creatives").select("*").order("created_at", desc=True).execute()
        return [Creative(**row) for row in result.data or []]

    def get_ad_copies(self) -> List[AdCopy]:
        """Fetch all ad copies (every type), newest first."""
        result = self.supabase.table("ad_copies").select("*").order("created_at", desc=True).execute()
        return [AdCopy(**row) for row in result.data or []]

    # ============================================
    # SCOPE
    # ============================================

    def get_projects(self) -> List[Project]:
        try:
            result = self.supabase.table("projects").select("id, name, created_at").order("name").execute()
            return [Project(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Failed to get projects: {e}")
            return []

    def get_subprojects(self, project_id: Optional[str] = None) -> List[Subproject]:
        """
        Fetch subprojects, optionally only those of one project.

        Args:
            project_id: Restrict to this project (None = all)
        """
        try:
            query = self.supabase.table("subprojects").select("id, name, project_id, created_at")
            if project_id:
                query = query.eq("project_id", project_id)
            result = query.order("name").execute()
            return [Subproject(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Failed to get subprojects for project {project_id}: {e}")
            return []

    # ============================================
    # STORAGE
    # ============================================

    def get_creative_url(self, storage_path: str) -> str:
        """Public URL of a creative's file in the creatives bucket."""
        if not storage_path:
            return ""
        return get_creatives_bucket(self.supabase).get_public_url(storage_path)

    # ============================================
    # AD CREATION
    # ============================================

    async def create_ads(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Insert ad rows in a single bulk request.

        Args:
            rows: Ad rows with creative/headline/primary/description ids and
                user/project/subproject ownership

        Returns:
            Inserted rows as returned by Supabase

        Raises:
            pydantic.ValidationError: If a row is missing a combination id
            Exception: Whatever the Supabase client raises on failure
        """
        if not rows:
            return []

        payload = [AdRecord(**row).model_dump() for row in rows]
        result = self.supabase.table(Config.ADS_TABLE).insert(payload).execute()

        logger.info(f"Inserted {len(payload)} ads into {Config.ADS_TABLE}")
        return result.data or []
