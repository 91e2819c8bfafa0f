# matcher.py
# Naive relevance scoring: counts how many words of a resume's file name also
# appear in the job description's file name.
import logging

import settings
from text_utils import clean_name, tokenize

logger = logging.getLogger(__name__)


def match_count(jd_tokens, resume_tokens) -> int:
    # Repeated resume tokens each count, JD tokens are only a membership test
    jd_set = set(jd_tokens)
    return sum(1 for token in resume_tokens if token in jd_set)


def matched_keywords(jd_tokens, resume_tokens) -> list:
    """Distinct resume tokens found in the JD, in first-seen order."""
    jd_set = set(jd_tokens)
    matched = []
    for token in resume_tokens:
        if token in jd_set and token and token not in matched:
            matched.append(token)
    return matched


def suggestion_for(score: int) -> str:
    if score >= settings.EXCELLENT_THRESHOLD:
        return settings.SUGGESTION_EXCELLENT
    if score >= settings.GOOD_THRESHOLD:
        return settings.SUGGESTION_GOOD
    return settings.SUGGESTION_TAILOR


def score(jd_tokens, resume_tokens) -> tuple[int, str]:
    """
    Returns (score, suggestion).

    Every resume starts at BASE_SCORE and gains POINTS_PER_MATCH for each
    token it shares with the JD, capped at MAX_SCORE.
    """
    matches = match_count(jd_tokens, resume_tokens)
    value = min(settings.MAX_SCORE, settings.BASE_SCORE + matches * settings.POINTS_PER_MATCH)
    return value, suggestion_for(value)


def score_resumes(jd_file, resumes, store) -> list:
    """
    Score every resume against the JD file name.

    One link is created in `store` per resume. Results come back in upload
    order; sorting is left to ranker.rank().
    """
    jd_tokens = tokenize(jd_file.name)
    scored = []
    for resume in resumes:
        resume_tokens = tokenize(resume.name)
        value, suggestion = score(jd_tokens, resume_tokens)
        scored.append({
            "name": resume.name,
            "score": value,
            "link": store.create(resume.name, resume.data),
            "suggestion": suggestion,
            "matched_keywords": matched_keywords(jd_tokens, resume_tokens),
        })
        logger.debug("Scored %s (%s): %d", resume.name, clean_name(resume.name), value)
    logger.info("Scored %d resume(s) against %s", len(scored), jd_file.name)
    return scored
