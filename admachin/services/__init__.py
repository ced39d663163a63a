"""
Services layer for AdMachin.

Separates Supabase access (AdLibraryService) from the pure ad creator core.
"""

from .models import (
    CreativeType,
    CopyType,
    Creative,
    AdCopy,
    Project,
    Subproject,
    AdRecord,
)
from .library import CopyPools, filter_by_scope, split_ad_copies, label_for
from .ad_library_service import AdLibraryService
