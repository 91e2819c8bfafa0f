import pytest

import settings
from matcher import match_count, matched_keywords, score, score_resumes, suggestion_for
from storage import LinkStore
from text_utils import tokenize

JD = tokenize("backend-engineer.pdf")


def test_scenario_two_matches_is_good():
    assert score(JD, tokenize("backend_engineer_resume.pdf")) == (70, settings.SUGGESTION_GOOD)


def test_scenario_no_matches_gets_base_score():
    assert score(JD, tokenize("random_cv.pdf")) == (50, settings.SUGGESTION_TAILOR)


def test_scenario_score_is_capped():
    jd = ["python", "backend", "aws", "docker", "sql", "senior"]
    assert score(jd, jd) == (100, settings.SUGGESTION_EXCELLENT)


def test_repeated_resume_tokens_count_each_time():
    assert match_count(JD, ["backend", "backend", "backend"]) == 3
    assert score(JD, ["backend", "backend", "backend", "backend"])[0] == 90


def test_empty_jd_tokens_give_base_score():
    assert score([], ["backend", "engineer"]) == (50, settings.SUGGESTION_TAILOR)


def test_empty_tokens_match_each_other():
    # "_backend.pdf" and "_cv.pdf" both start with an empty token
    assert match_count(tokenize("_backend.pdf"), tokenize("_cv.pdf")) == 1


@pytest.mark.parametrize("matches", range(0, 9))
def test_score_bounds_and_monotonic(matches):
    tokens = ["kw"] * matches
    value, _ = score(["kw"], tokens)
    assert 50 <= value <= 100
    assert value == min(100, 50 + 10 * matches)
    if matches:
        assert value >= score(["kw"], tokens[:-1])[0]


@pytest.mark.parametrize("value,expected", [
    (100, settings.SUGGESTION_EXCELLENT),
    (90, settings.SUGGESTION_EXCELLENT),
    (80, settings.SUGGESTION_GOOD),
    (70, settings.SUGGESTION_GOOD),
    (60, settings.SUGGESTION_TAILOR),
    (50, settings.SUGGESTION_TAILOR),
])
def test_suggestion_tiers(value, expected):
    assert suggestion_for(value) == expected


def test_matched_keywords_distinct_and_ordered():
    assert matched_keywords(JD, ["engineer", "backend", "engineer", "cv"]) == ["engineer", "backend"]


def test_score_resumes_keeps_upload_order_and_creates_links(pdf):
    store = LinkStore()
    resumes = [pdf("random_cv.pdf", b"a"), pdf("backend_engineer_resume.pdf", b"b")]
    scored = score_resumes(pdf("backend-engineer.pdf"), resumes, store)

    assert [r["name"] for r in scored] == ["random_cv.pdf", "backend_engineer_resume.pdf"]
    assert [r["score"] for r in scored] == [50, 70]
    assert len(store) == 2
    assert store.read(scored[1]["link"]) == b"b"


def test_score_resumes_with_no_resumes(pdf):
    store = LinkStore()
    assert score_resumes(pdf("backend-engineer.pdf"), [], store) == []
    assert len(store) == 0
