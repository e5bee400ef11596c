"""
Streamlit UI for Ink and Feather.

Single-page form for uploading a handwritten document, collecting contact
details, and handing both to the processing webhook. All behaviour lives in
``UploadFormController``; this page only renders its state and forwards
widget events.

Run with ``streamlit run inkfeather/ui/app.py``.
"""

import asyncio
import logging

import streamlit as st
from dotenv import load_dotenv

from inkfeather.core.config import get_settings
from inkfeather.core.logging import configure_logging
from inkfeather.domain import events
from inkfeather.domain.controller import UploadFormController
from inkfeather.domain.models import SelectedFile
from inkfeather.infrastructure.clients.webhook_http import create_webhook_client

load_dotenv()

settings = get_settings()
configure_logging(settings.LOG_LEVEL, json_format=settings.LOG_JSON)
logger = logging.getLogger(__name__)

ACCEPTED_FORMATS = "JPG · PNG · WebP · HEIC"


def get_controller() -> UploadFormController:
    """Return the controller bound to this browser session."""
    if "controller" not in st.session_state:
        st.session_state.controller = UploadFormController(
            webhook=create_webhook_client(settings),
            max_upload_bytes=settings.MAX_UPLOAD_BYTES,
        )
        st.session_state.last_upload = None
        logger.info("Upload form session started", extra={"webhook_url": settings.webhook_url})
    return st.session_state.controller


controller = get_controller()
generation = controller.state.input_generation

# --- Page setup ---
st.set_page_config(page_title=settings.APP_NAME, layout="centered")

st.title("🖋️ Ink and Feather")
st.write("Upload handwritten documents to extract text and automate your workflow")

# --- Simple CSS tweaks ---
st.markdown(
    """
<style>
.block-container{max-width:760px;padding-top:1.25rem;}
.meta{color:#6b7280;font-size:0.92rem;margin:0.25rem 0 1rem 0;}
.stButton>button{border-radius:10px;padding:.65rem 1rem;font-weight:600;}
</style>
""",
    unsafe_allow_html=True,
)

# --- Error/Success messages ---
submission = controller.state.submission
if submission.error:
    st.error(submission.error, icon="⚠️")
if submission.success:
    st.success(submission.success, icon="✅")

# --- Contact information ---
st.subheader("Your Information")
st.caption("We'll send the results to your email")
col_email, col_phone = st.columns(2)
with col_email:
    email = st.text_input(
        "Email Address *",
        value=controller.state.contact.email,
        placeholder="your@email.com",
        key=f"email_{generation}",
    )
with col_phone:
    phone = st.text_input(
        "Phone Number (Optional)",
        value=controller.state.contact.phone,
        placeholder="(555) 123-4567",
        key=f"phone_{generation}",
    )

if email != controller.state.contact.email:
    controller.set_email(email)
if phone != controller.state.contact.phone:
    controller.set_phone(phone)

# --- Upload ---
st.subheader("📄 Upload Your Document")
st.caption("Drop your handwritten document here to extract text")
uploaded = st.file_uploader(
    "Drop your document here or click to browse your files",
    accept_multiple_files=False,
    help=f"Supported: {ACCEPTED_FORMATS}",
    key=f"uploader_{generation}",
)

if uploaded is not None:
    upload_key = (generation, uploaded.name, uploaded.size)
    # Streamlit re-runs the script on every interaction; only forward new picks
    if st.session_state.last_upload != upload_key:
        st.session_state.last_upload = upload_key
        controller.select_from_picker(
            SelectedFile.from_upload(uploaded.name, uploaded.type, uploaded.getvalue())
        )
        st.rerun()

selected = controller.state.selected_file
if selected is not None:
    with st.container(border=True):
        col_info, col_reset = st.columns([3, 1])
        with col_info:
            st.markdown(f"**{selected.name}**")
            st.caption(selected.size_label)
        with col_reset:
            if st.button("Start Over", type="secondary", use_container_width=True):
                controller.reset()
                st.session_state.last_upload = None
                st.rerun()

        if st.button(
            controller.button_label,
            type="primary",
            disabled=not controller.can_submit,
            use_container_width=True,
        ):
            with st.status(events.PREPARING_LABEL, expanded=False) as progress:
                # Mirror every step label the controller reports while the request runs
                controller.listener = lambda state: (
                    progress.update(label=state.submission.step) if state.submission.step else None
                )
                try:
                    asyncio.run(controller.submit())
                finally:
                    controller.listener = None
            st.rerun()

# --- Footer ---
st.divider()
st.caption("✨ Powered by intelligent document processing")
st.caption("Transform your handwritten notes into digital workflows ✒️")
