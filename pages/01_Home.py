# pages/01_Home.py
import streamlit as st

import settings
from session import init_session

init_session(st.session_state)

st.title("Welcome to Our Resume Screening App")
st.markdown(settings.TAGLINE)

if st.button("Get Started", type="primary"):
    st.switch_page("pages/02_Upload_JD.py")
