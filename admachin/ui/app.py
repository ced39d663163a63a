"""
AdMachin UI - Streamlit entry point.

Run with:
    streamlit run admachin/ui/app.py

Environment variables required:
    SUPABASE_URL: Supabase project URL
    SUPABASE_SERVICE_KEY: Supabase service key
    LOGFIRE_TOKEN: (optional) enables Logfire tracing
"""

import streamlit as st

st.set_page_config(
    page_title="AdMachin",
    page_icon="🎨",
    layout="wide",
    initial_sidebar_state="expanded",
)

from admachin.core.observability import setup_logfire


@st.cache_resource
def init_observability() -> bool:
    """Configure Logfire once per process."""
    return setup_logfire(service_name="admachin-ui")


init_observability()

pg = st.navigation({
    "Ads": [
        st.Page("pages/01_🎨_Ad_Creator.py", title="Ad Creator", icon="🎨"),
    ],
})
pg.run()
