"""Shared UI utilities for Streamlit pages."""

import logging
from typing import List, Optional

import streamlit as st

from admachin.services import AdCopy, AdLibraryService, Creative, Project, Subproject

logger = logging.getLogger(__name__)


@st.cache_resource
def get_library_service() -> AdLibraryService:
    return AdLibraryService()


@st.cache_data(ttl=300)  # Cache for 5 minutes
def load_creatives() -> List[Creative]:
    return get_library_service().get_creatives()


@st.cache_data(ttl=300)
def load_ad_copies() -> List[AdCopy]:
    return get_library_service().get_ad_copies()


@st.cache_data(ttl=300)
def load_projects() -> List[Project]:
    return get_library_service().get_projects()


@st.cache_data(ttl=300)
def load_subprojects(project_id: Optional[str]) -> List[Subproject]:
    return get_library_service().get_subprojects(project_id)


@st.cache_data(ttl=3600)
def get_creative_url(storage_path: str) -> str:
    """Public URL for a creative, cached per storage path."""
    return get_library_service().get_creative_url(storage_path)


def get_current_user_id() -> Optional[str]:
    """User id set by the hosting app's sign-in flow."""
    return st.session_state.get("user_id")
