# frontend/helpers/progress_ui.py
"""
Progress UI for the SEO generation run.
Progress is coarse: 0 while working, 100 once the enriched file is ready.
"""
import streamlit as st


class GenerationProgress:
    """Context manager showing a progress bar and status line during a run."""

    def __init__(self, message: str = "Generating SEO descriptions..."):
        self.message = message
        self.progress_bar = None
        self.status_text = None

    def __enter__(self):
        self.progress_bar = st.progress(0)
        self.status_text = st.empty()
        self.status_text.text(self.message)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.clear()
        return False  # Don't suppress exceptions

    def finish(self, progress: int, succeeded: bool):
        """Show the terminal state of a run, or clear the UI if it failed."""
        if not succeeded:
            self.clear()
            return
        if self.progress_bar:
            self.progress_bar.progress(progress)
        if self.status_text:
            self.status_text.text("✅ Complete!")

    def clear(self):
        if self.progress_bar:
            self.progress_bar.empty()
        if self.status_text:
            self.status_text.empty()
