"""
Configuration management for AdMachin
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration"""

    # Supabase
    SUPABASE_URL: str = os.getenv('SUPABASE_URL', '')
    SUPABASE_SERVICE_KEY: str = os.getenv('SUPABASE_SERVICE_KEY', '')

    # Storage / tables
    CREATIVES_BUCKET: str = os.getenv('CREATIVES_BUCKET', 'creatives')
    ADS_TABLE: str = os.getenv('ADS_TABLE', 'ads')

    # Ad creator preview
    AUTO_PREVIEW_LIMIT: int = int(os.getenv('AUTO_PREVIEW_LIMIT', '100'))
    PREVIEW_PAGE_SIZE: int = int(os.getenv('PREVIEW_PAGE_SIZE', '20'))

    @classmethod
    def validate(cls) -> bool:
        """Validate required configuration"""
        required = {
            'SUPABASE_URL': cls.SUPABASE_URL,
            'SUPABASE_SERVICE_KEY': cls.SUPABASE_SERVICE_KEY,
        }

        missing = [k for k, v in required.items() if not v]

        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")

        return True
