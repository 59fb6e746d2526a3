"""
File upload helpers for the SEO Description Generator.
Renders the CSV picker and resets the flow state whenever a new file is chosen.
"""

import streamlit as st

import frontend_config as config
from helpers.seo_flow import SEOFlowController


def accept_upload(controller: SEOFlowController, name: str, raw: bytes) -> bool:
    """
    Hand a picked file to the controller, refusing it when it is too large.

    A refused file still replaces the previous one, so nothing from the
    earlier upload stays on screen next to the size error.
    """
    size = len(raw)
    if size > config.MAX_UPLOAD_SIZE:
        controller.reject_file(
            f"File too large ({size/1024/1024:.2f} MB). "
            f"Max allowed is {config.MAX_UPLOAD_SIZE/1024/1024:.1f} MB."
        )
        return False

    controller.select_file(name, raw)
    return True


def _on_file_change(controller: SEOFlowController):
    uploaded_file = st.session_state.get("file_uploader")
    if uploaded_file is None:
        # Picker cleared: start over
        controller.clear_file()
        return

    accept_upload(controller, uploaded_file.name, uploaded_file.getvalue())


def handle_file_upload(controller: SEOFlowController):
    """
    Render the CSV uploader. Selecting a file stores it on the controller and
    clears rows, preview, download, progress and error from any previous run.
    """
    st.file_uploader(
        "Upload CSV file",
        type=["csv"],
        key="file_uploader",
        on_change=_on_file_change,
        args=(controller,),
        help="Comma-delimited, first line is the header. Needs 'email' and 'seo' columns.",
    )

    state = controller.state
    if state.has_file:
        st.write(f"File uploaded: {state.file_name}")
