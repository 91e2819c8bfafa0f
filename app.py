# app.py
import logging

import streamlit as st

import settings
from session import init_session

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# ---------------- Page Config ----------------
st.set_page_config(
    page_title=settings.APP_TITLE,
    page_icon=settings.PAGE_ICON,
    layout="wide",
)

# ---------------- Session State ----------------
init_session(st.session_state)

# ---------------- Navigation ----------------
# One linear flow: JD -> resumes -> results
pages = [
    st.Page("pages/01_Home.py", title="Home", icon=":material/home:", default=True),
    st.Page("pages/02_Upload_JD.py", title="Upload Job Description", icon=":material/description:"),
    st.Page("pages/03_Upload_Resumes.py", title="Upload Resumes", icon=":material/upload_file:"),
    st.Page("pages/04_Results.py", title="Results", icon=":material/leaderboard:"),
]

with st.sidebar:
    jd_file = st.session_state.jd_file
    st.markdown(f"**Job description:** {jd_file.name if jd_file else 'not selected'}")
    st.markdown(f"**Resumes:** {len(st.session_state.resumes)}")

pg = st.navigation(pages)
pg.run()
