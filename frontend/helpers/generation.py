# frontend/helpers/generation.py
"""
Generation section for the SEO Description Generator.
Runs the enrichment flow, then shows errors, the download button and the preview.
"""
import pandas as pd
import streamlit as st

import frontend_config as config
from helpers.progress_ui import GenerationProgress
from helpers.seo_flow import SEOFlowController


def show_generation_controls(controller: SEOFlowController):
    """
    Entry point for the generation section.
    Displays the Generate button and the results of the latest run.
    """
    state = controller.state
    if state.has_file:
        _handle_generation_request(controller)

    if state.error:
        st.error(f"**Error:** {state.error}")

    if state.rows_missing_seo:
        st.write(f"Rows missing SEO descriptions: {len(state.rows_missing_seo)}")

    _show_download(controller)
    _show_preview(controller)


def _handle_generation_request(controller: SEOFlowController):
    """Internal: Render the Generate button and run the flow when clicked.

    The run blocks this script pass, so the spinner is the busy indicator.
    """
    state = controller.state
    if not st.button("Generate SEO Descriptions", key="generate_seo_btn"):
        return

    with GenerationProgress() as progress:
        with st.spinner("Generating SEO descriptions..."):
            succeeded = controller.generate()
        progress.finish(state.progress, succeeded)


def _show_download(controller: SEOFlowController):
    """Internal: Offer the enriched CSV once it exists."""
    state = controller.state
    if state.download_bytes is None:
        return
    st.download_button(
        "Download Updated CSV",
        data=state.download_bytes,
        file_name=config.DOWNLOAD_FILE_NAME,
        mime=config.DOWNLOAD_MIME,
        key="download_seo_csv",
    )


def _show_preview(controller: SEOFlowController):
    """Internal: Table of the first rows with their SEO descriptions."""
    rows = controller.state.preview_rows
    if not rows:
        return
    st.subheader(f"Preview (First {config.PREVIEW_ROWS} Results)")
    df = pd.DataFrame(rows)
    for column in (config.EMAIL_COLUMN, config.SEO_COLUMN):
        if column not in df.columns:
            df[column] = ""
    preview = df[[config.EMAIL_COLUMN, config.SEO_COLUMN]].rename(
        columns={config.EMAIL_COLUMN: "Email", config.SEO_COLUMN: "SEO Description"}
    )
    st.dataframe(preview, use_container_width=True, hide_index=True)
