# session.py
# Carries the selected job description and resumes between pages.
# Every function takes the state mapping explicitly (st.session_state in the
# app, a plain dict in tests) so nothing here imports streamlit.
import logging
import uuid
from dataclasses import dataclass

import settings
from errors import MissingInputError
from matcher import score_resumes
from ranker import rank
from storage import LinkStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectedFile:
    name: str
    data: bytes = b""

    @classmethod
    def from_upload(cls, uploaded):
        """Copy a streamlit UploadedFile into an immutable SelectedFile."""
        return cls(name=uploaded.name, data=uploaded.getvalue())


# ---------------- State Keys ----------------
DEFAULTS = {
    "jd_file": None,
    "resumes": list,
    "flow_id": None,
    "scored": list,
    "scored_flow_id": None,
    "link_store": LinkStore,
}


def init_session(state):
    for key, default in DEFAULTS.items():
        if key not in state:
            state[key] = default() if callable(default) else default


def _new_flow(state):
    state["flow_id"] = uuid.uuid4().hex


def set_jd_file(state, jd_file):
    state["jd_file"] = jd_file
    _new_flow(state)
    logger.info("Job description selected: %s", jd_file.name if jd_file else None)


def set_resumes(state, resumes):
    state["resumes"] = list(resumes)
    _new_flow(state)
    logger.info("%d resume(s) selected", len(state["resumes"]))


def check_jd_file(jd_file):
    if not jd_file:
        logger.warning("Missing job description")
        raise MissingInputError(settings.MISSING_JD_PROMPT)
    return jd_file


def check_inputs(jd_file, resumes):
    if not resumes or not jd_file:
        logger.warning("Missing resumes or job description")
        raise MissingInputError(settings.MISSING_INPUTS_PROMPT)
    return jd_file, resumes


def require_jd_file(state):
    return check_jd_file(state.get("jd_file"))


def require_inputs(state):
    return check_inputs(state.get("jd_file"), state.get("resumes"))


def _release_scored(state):
    previous = state.get("scored") or []
    state["link_store"].revoke_all(r["link"] for r in previous)
    state["scored"] = []
    state["scored_flow_id"] = None


def current_results(state) -> list:
    """
    Ranked results for the carried inputs.

    Recomputed only when the selection changed since the last call. The
    previous batch's links are revoked before the new batch is created.
    """
    init_session(state)
    if not state["resumes"] or not state["jd_file"]:
        _release_scored(state)
        return []
    if state["scored_flow_id"] != state["flow_id"] or not state["scored"]:
        _release_scored(state)
        state["scored"] = rank(score_resumes(state["jd_file"], state["resumes"], state["link_store"]))
        state["scored_flow_id"] = state["flow_id"]
    return state["scored"]


def reset_session(state):
    """Start a new flow: release all links and forget the selections."""
    init_session(state)
    _release_scored(state)
    state["jd_file"] = None
    state["resumes"] = []
    state["flow_id"] = None
    logger.info("Session reset")
