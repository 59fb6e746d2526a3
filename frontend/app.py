import os

import requests
import streamlit as st

from helpers.file_upload import handle_file_upload
from helpers.generation import show_generation_controls
from helpers.seo_flow import EnrichmentClient, SEOFlowController, SEOFlowState

from frontend_config import API_BASE as CONFIG_API_BASE

# Use a runtime API base which can be overridden per-session via the UI
API_BASE = os.getenv("API_URL", CONFIG_API_BASE)


def get_api_base():
    """Return per-session override or configured API base."""
    return st.session_state.get('custom_api') or API_BASE


def show_sidebar():
    with st.sidebar:
        st.header("Configuration")
        st.subheader("API")
        current_api = get_api_base()
        st.write("Current API URL:")
        st.code(current_api)
        if st.button("Edit API URL"):
            st.session_state.edit_api = True
        if st.session_state.edit_api:
            new_api = st.text_input("API URL", value=current_api)
            cols = st.columns([1, 1])
            if cols[0].button("Save API URL"):
                st.session_state.custom_api = new_api.strip() if new_api else None
                st.session_state.edit_api = False
                st.rerun()
            if cols[1].button("Cancel"):
                st.session_state.edit_api = False

        if st.button("Reset App", key="reset_app", help="Clear the uploaded file and results"):
            st.session_state.seo_flow = SEOFlowState()
            st.rerun()

        # Quick API health check tool
        st.markdown("---")
        st.subheader("API Health")
        if st.button("Test", key="test_api", help="Check if the API is reachable"):
            try:
                with st.spinner("Testing API connection..."):
                    resp = requests.get(f"{get_api_base().rstrip('/')}/health", timeout=5)
                if resp.status_code == 200:
                    st.success("✅ API Online")
                else:
                    st.warning(f"⚠️ Status {resp.status_code}")
            except requests.exceptions.RequestException as e:
                st.error(f"❌ API Offline. Connection failed: {str(e)}")


def main():
    st.set_page_config(page_title="SEO Description Generator", layout="centered")

    # --- Session state initialization ---
    if 'seo_flow' not in st.session_state:
        st.session_state.seo_flow = SEOFlowState()
    if 'custom_api' not in st.session_state:
        st.session_state.custom_api = None
    if 'edit_api' not in st.session_state:
        st.session_state.edit_api = False

    show_sidebar()

    controller = SEOFlowController(
        st.session_state.seo_flow,
        EnrichmentClient(api_base=get_api_base()),
    )

    st.title("SEO Description Generator")
    st.caption(
        "Upload a CSV of contacts. Rows with an empty **seo** column get a short "
        "description generated for the domain of their **email**."
    )

    handle_file_upload(controller)
    show_generation_controls(controller)


if __name__ == "__main__":
    main()
