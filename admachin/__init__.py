"""
AdMachin - Ad creative combination builder for Facebook/Instagram campaigns.

Combines creatives, headlines, primary texts and descriptions into
reviewable ad combinations and bulk-creates the selected ones in Supabase.
"""

__version__ = "1.0.0"
__author__ = "AdMachin Team"
