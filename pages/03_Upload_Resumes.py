# pages/03_Upload_Resumes.py
import streamlit as st

import settings
from errors import MissingInputError
from session import SelectedFile, check_inputs, init_session, set_resumes

init_session(st.session_state)

st.header("Upload Resumes")

resume_uploads = st.file_uploader(
    "Resumes (PDF)",
    type=settings.ACCEPTED_TYPES,
    accept_multiple_files=True,
    key="resume_uploader",
) or []

st.write(f"{len(resume_uploads)} files uploaded")
if resume_uploads:
    st.markdown("\n".join(f"- {f.name}" for f in resume_uploads))

if st.button("View Results", type="primary"):
    try:
        check_inputs(st.session_state.jd_file, resume_uploads)
    except MissingInputError as e:
        st.error(str(e))
    else:
        set_resumes(st.session_state, [SelectedFile.from_upload(f) for f in resume_uploads])
        st.switch_page("pages/04_Results.py")
