"""
Supabase access for AdMachin.

One shared client per process; the creatives storage bucket is resolved
through it so previews and uploads agree on the bucket name.
"""

from typing import Optional
from supabase import create_client, Client
from .config import Config


_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Return the process-wide Supabase client, creating it on first use.

    Raises:
        ValueError: If SUPABASE_URL or SUPABASE_SERVICE_KEY is missing
    """
    global _client

    if _client is None:
        Config.validate()
        _client = create_client(Config.SUPABASE_URL, Config.SUPABASE_SERVICE_KEY)

    return _client


def get_creatives_bucket(client: Optional[Client] = None):
    """Storage bucket API for creative media files."""
    client = client or get_supabase_client()
    return client.storage.from_(Config.CREATIVES_BUCKET)
