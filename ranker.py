# ranker.py
import pandas as pd

import settings

COLUMNS = ["Rank", "Resume", "Score", "Suggestion", "Matched keywords"]


def rank(scored: list) -> list:
    """
    Sort by score, highest first, and number the results from 1.

    sorted() is stable, so resumes with equal scores keep their upload order.
    """
    ordered = sorted(scored, key=lambda r: r["score"], reverse=True)
    return [dict(result, rank=i + 1) for i, result in enumerate(ordered)]


def rank_marker(position: int) -> str:
    return settings.RANK_MARKERS.get(position, str(position))


def results_frame(ranked: list, markers: bool = False) -> pd.DataFrame:
    rows = [
        (
            rank_marker(r["rank"]) if markers else r["rank"],
            r["name"],
            r["score"],
            r["suggestion"],
            ", ".join(r.get("matched_keywords", [])),
        )
        for r in ranked
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def to_csv(ranked: list) -> bytes:
    return results_frame(ranked).to_csv(index=False).encode("utf-8")
