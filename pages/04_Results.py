# pages/04_Results.py
import streamlit as st

import settings
from ranker import rank_marker, results_frame, to_csv
from session import current_results, init_session, reset_session

init_session(st.session_state)

st.header("Resume Rankings")

# Always called first, it also releases a superseded batch's links
ranked = current_results(st.session_state)

if not st.session_state.resumes:
    st.write(settings.EMPTY_RESULTS_MESSAGE)
    st.stop()

if not ranked:
    # resumes carried over but the JD is gone: empty table, nothing to score
    st.warning(settings.MISSING_INPUTS_PROMPT)
    st.dataframe(results_frame([]), hide_index=True, use_container_width=True)
    st.stop()

store = st.session_state.link_store

# ── Summary ─────────────────────────────────────────────────────
df = results_frame(ranked)
col1, col2, col3 = st.columns(3)
col1.metric("Resumes", len(df))
col2.metric("Best Score", int(df["Score"].max()))
col3.metric("Average Score", f"{df['Score'].mean():.1f}")

# ── Ranking table ───────────────────────────────────────────────
widths = [1, 4, 1, 4, 2]
for col, title in zip(st.columns(widths), ["Rank", "Resume", "Score", "Suggestions", "Download"]):
    col.markdown(f"**{title}**")

for result in ranked:
    c_rank, c_name, c_score, c_hint, c_dl = st.columns(widths)
    c_rank.markdown(rank_marker(result["rank"]))
    c_name.markdown(f"📄 {result['name']}")
    c_score.markdown(str(result["score"]))
    c_hint.markdown(result["suggestion"])
    c_dl.download_button(
        "Download",
        data=store.read(result["link"]),
        file_name=store.name_of(result["link"]),
        mime="application/pdf",
        key=f"download_{result['link']}",
    )

# ── Keyword detail ──────────────────────────────────────────────
st.subheader("Matched keywords")
st.dataframe(
    results_frame(ranked, markers=True),
    column_config={
        "Rank": st.column_config.TextColumn("Rank", width="small"),
        "Score": st.column_config.ProgressColumn("Score", min_value=0, max_value=settings.MAX_SCORE, format="%d"),
    },
    hide_index=True,
    use_container_width=True,
)

st.divider()
st.download_button(
    "Download CSV",
    data=to_csv(ranked),
    file_name=settings.CSV_FILE_NAME,
    mime="text/csv",
)

if st.button("Start over"):
    reset_session(st.session_state)
    st.switch_page("pages/01_Home.py")
