"""
Streamlit page: log a practice and browse the history.

Usage:
    streamlit run ui/app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import streamlit as st

from app.core.config import settings
from app.core.logging import configure_logging
from ui.client import PracticeApiClient
from ui.pace import format_pace
from ui.practice_log import PracticeDraft, PracticeLog, load_practices, submit_draft

configure_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)

client = PracticeApiClient(settings.API_BASE_URL, timeout=settings.API_TIMEOUT_SECONDS)

# -------------------------------------------------
# Session State
# -------------------------------------------------
if "practice_log" not in st.session_state:
    st.session_state.practice_log = load_practices(client, PracticeLog())

# -------------------------------------------------
# Page config
# -------------------------------------------------
st.set_page_config(page_title="Swimming Practice Tracker", page_icon="🏊")

st.title("🏊 Swimming Practice Tracker")
st.caption("Track your swimming sessions and monitor your progress")

# -------------------------------------------------
# Log a practice
# -------------------------------------------------
log: PracticeLog = st.session_state.practice_log
draft = log.draft

with st.form("new_practice", clear_on_submit=False):
    st.subheader("📝 Log New Practice Session")
    left, right = st.columns(2)
    practice_date = left.date_input("Date", value=draft.date)
    duration = right.number_input("Duration (minutes)", min_value=0, step=1, value=draft.duration_minutes)
    distance = left.number_input("Distance (meters)", min_value=0.0, step=25.0, value=float(draft.distance_meters))
    notes = st.text_area("Notes (optional)", value=draft.notes or "",
                         placeholder="How did it feel? Sets, drills, technique focus...")
    submitted = st.form_submit_button("Log Practice", use_container_width=True)

if submitted:
    new_draft = PracticeDraft(date=practice_date, duration_minutes=int(duration),
                              distance_meters=float(distance), notes=notes or None)
    with st.spinner("Saving practice..."):
        st.session_state.practice_log = submit_draft(client, log, new_draft)
    st.rerun()

if log.error:
    st.error(log.error)

# -------------------------------------------------
# History
# -------------------------------------------------
st.subheader("📊 Practice History")

if not log.practices:
    st.info("No practices logged yet. Start by adding your first swimming session above!")
else:
    for practice in log.practices:
        with st.container(border=True):
            head, badge = st.columns([4, 1])
            head.markdown(f"**📅 {practice.date:%A, %B %d, %Y}**")
            head.caption(f"Logged: {practice.created_at:%Y-%m-%d}")
            badge.markdown(f"Session #{practice.id}")

            k1, k2, k3 = st.columns(3)
            k1.metric("Distance", f"{practice.distance_meters:g} m")
            k2.metric("Duration", f"{practice.duration_minutes} min")
            k3.metric("Pace/100m", format_pace(practice.distance_meters, practice.duration_minutes))

            if practice.notes:
                st.markdown("**📝 Notes:**")
                st.text(practice.notes)

    st.divider()
    st.markdown(f"🏆 Total sessions logged: **{log.total}**")

if st.button("Refresh"):
    st.session_state.practice_log = load_practices(client, log)
    st.rerun()
