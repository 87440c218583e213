"""Streamlit UI for InternshipMatch."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, MutableMapping

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from internmatch import config
from internmatch.engine import Matcher
from internmatch.errors import InternMatchError
from internmatch.export import EXPORT_FILENAME, results_to_json
from internmatch.log import get_logger
from internmatch.models import ScoredResult, UserProfile
from internmatch.vocabulary import suggest

log = get_logger(__name__)

SHOWN = 5
MORE = 20

# ── State ────────────────────────────────────────────────────────────────


def _matcher() -> Matcher:
    """One Matcher per browser session; the initial dataset loads once."""
    if "matcher" not in st.session_state:
        matcher = Matcher(weights=config.load_weights(), limit=config.result_limit())
        try:
            url = config.dataset_url()
            if url:
                matcher.load_url(url)
            else:
                matcher.load_file(config.dataset_path())
        except InternMatchError as exc:
            log.error("Initial dataset load failed: %s", exc)
            st.session_state["load_error"] = f"Dataset load error: {exc}"
        st.session_state["matcher"] = matcher
    return st.session_state["matcher"]


def _clear() -> None:
    for key in ("education", "sector", "location", "skills", "results"):
        st.session_state.pop(key, None)


# ── Widgets ──────────────────────────────────────────────────────────────


def apply_upload(state: MutableMapping[str, Any], matcher: Matcher, file_id: str, name: str, data: bytes) -> bool:
    """Load an uploaded dataset once per distinct upload. True when it replaced the catalog."""
    # file_id changes on every new upload, even under the same filename
    if state.get("uploaded_id") == file_id:
        return False
    state["uploaded_id"] = file_id
    catalog = matcher.load_text(data, source=name)
    state.pop("load_error", None)
    state.pop("results", None)
    state["notice"] = f"Dataset uploaded — {len(catalog)} internships indexed."
    return True


def _upload(matcher: Matcher) -> None:
    uploaded = st.file_uploader("Upload dataset (JSON)", type=["json"])
    if uploaded is None:
        return
    try:
        replaced = apply_upload(st.session_state, matcher, uploaded.file_id, uploaded.name, uploaded.getvalue())
    except InternMatchError as exc:
        st.error(str(exc))
        return
    if replaced:
        st.rerun()


def _card(s: ScoredResult) -> None:
    r = s.record
    with st.container(border=True):
        left, right = st.columns([4, 1])
        left.markdown(f"**{r.title}**  \n{r.company} • {r.location} • {r.duration or '—'}")
        right.metric("Match", f"{s.percent}%")
        if r.description:
            st.write(r.description)
        if r.skills:
            st.caption(" · ".join(r.skills[:8]))
        st.caption(f"Stipend: {r.stipend or '—'}")
        with st.expander("Ranking breakdown"):
            b = s.breakdown
            st.write(f"Skills: {b.skills:.0%}")
            st.write(f"Location: {b.location:.0%}")
            st.write(f"Education: {b.education:.0%}")
            st.write(f"Sector: {b.sector:.0%}")


# ── Page ─────────────────────────────────────────────────────────────────


def main() -> None:
    st.set_page_config(page_title="InternshipMatch", page_icon="🎯", layout="wide")
    matcher = _matcher()

    head, actions = st.columns([3, 1])
    head.title("InternshipMatch")
    head.caption("Enter skills & preferences → we return the best matching internships")
    if actions.button("Clear", use_container_width=True):
        _clear()
        st.rerun()

    if st.session_state.get("notice"):
        st.success(st.session_state.pop("notice"))
    if st.session_state.get("load_error"):
        st.error(st.session_state["load_error"])

    form_col, results_col = st.columns([1, 2])
    with form_col:
        st.subheader("Your Profile")
        catalog = matcher.catalog
        vocab = catalog.vocabulary if catalog else None

        education = st.text_input("Education", key="education", placeholder="e.g. B.Tech")
        if vocab and education:
            st.caption("Suggestions: " + ", ".join(suggest(vocab, "educations", education, limit=6)))
        sector = st.text_input("Sector", key="sector", placeholder="e.g. IT Services")
        if vocab and sector:
            st.caption("Suggestions: " + ", ".join(suggest(vocab, "sectors", sector, limit=6)))
        location = st.text_input("Location", key="location", placeholder="e.g. Bangalore / Remote")
        if vocab and location:
            st.caption("Suggestions: " + ", ".join(suggest(vocab, "locations", location, limit=6)))
        skills = st.multiselect(
            "Skills",
            options=list(vocab.skills[:500]) if vocab else [],
            key="skills",
            accept_new_options=True,
            placeholder="Type a skill, e.g. 're' for React",
        )

        if st.button("Find Best Internships", type="primary", use_container_width=True):
            profile = UserProfile.from_dict(
                {"skills": skills, "education": education, "sector": sector, "location": location}
            )
            try:
                with st.spinner("Scoring internships…"):
                    st.session_state["results"] = matcher.find(profile)
            except InternMatchError as exc:
                st.error(str(exc))

        st.divider()
        _upload(matcher)

    with results_col:
        results: list[ScoredResult] = st.session_state.get("results", [])
        shown = min(SHOWN, len(results))
        st.subheader("Top Matches" + (f" — showing {shown} of {len(results)}" if results else ""))
        for s in results[:SHOWN]:
            _card(s)
        if len(results) > SHOWN:
            with st.expander(f"Show more matches ({len(results) - SHOWN})"):
                for s in results[SHOWN:MORE]:
                    _card(s)
        st.download_button(
            "Download",
            data=results_to_json(results),
            file_name=EXPORT_FILENAME,
            mime="application/json",
            disabled=not results,
        )


if __name__ == "__main__":
    main()
