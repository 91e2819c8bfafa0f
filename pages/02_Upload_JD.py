# pages/02_Upload_JD.py
import streamlit as st

import settings
from errors import MissingInputError
from session import SelectedFile, check_jd_file, init_session, set_jd_file

init_session(st.session_state)

st.header("Upload Job Description")

jd_upload = st.file_uploader(
    "Job description (PDF)",
    type=settings.ACCEPTED_TYPES,
    accept_multiple_files=False,
    key="jd_uploader",
)
if jd_upload:
    st.write(f"Uploaded: {jd_upload.name}")

if st.button("Next", type="primary"):
    try:
        check_jd_file(jd_upload)
    except MissingInputError as e:
        st.error(str(e))
    else:
        set_jd_file(st.session_state, SelectedFile.from_upload(jd_upload))
        st.switch_page("pages/03_Upload_Resumes.py")
