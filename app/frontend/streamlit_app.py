"""Streamlit frontend for Code Meet Hub."""
import streamlit as st
import pandas as pd
from datetime import date, time, timedelta
import os
from app.backend.core.logging import setup_logging
from app.frontend.auth import AuthContext, AuthError
from app.frontend.client import BackendClient
from app.frontend.config import settings
from app.frontend.schemas import EventDraft, SubmissionStatus
from app.frontend.services.feed import load_feed
from app.frontend.services.presentation import (
    display_name,
    format_event_datetime,
    user_initials,
    visible_tags,
)
from app.frontend.services.submission import EventSubmissionService
from app.frontend.services.tags import MAX_TAGS, add_tag, remove_tag

st.set_page_config(
    page_title="Code Meet Hub",
    page_icon="💻",
    layout="wide"
)

setup_logging(settings.log_level)

# API base URL - environment variable, then Streamlit secrets, then settings
API_BASE_URL = os.getenv("API_BASE_URL")
if not API_BASE_URL:
    try:
        API_BASE_URL = st.secrets.get("API_BASE_URL", settings.api_base_url)
    except (AttributeError, FileNotFoundError, KeyError):
        API_BASE_URL = settings.api_base_url


# Per-browser-session state
if "auth" not in st.session_state:
    st.session_state.auth = AuthContext(BackendClient(base_url=API_BASE_URL))
if "submitter" not in st.session_state:
    auth_context = st.session_state.auth
    st.session_state.submitter = EventSubmissionService(auth_context.client, auth_context)
if "tags" not in st.session_state:
    st.session_state.tags = []
if "submitting" not in st.session_state:
    st.session_state.submitting = False
if "pending_draft" not in st.session_state:
    st.session_state.pending_draft = None
if "submission_result" not in st.session_state:
    st.session_state.submission_result = None

auth: AuthContext = st.session_state.auth
submitter: EventSubmissionService = st.session_state.submitter


def render_user_menu() -> None:
    """Sidebar: sign-in/sign-up forms or the signed-in user's menu."""
    st.sidebar.title("Account")

    if not auth.is_authenticated:
        sign_in_tab, sign_up_tab = st.sidebar.tabs(["Sign in", "Sign up"])
        with sign_in_tab:
            with st.form("sign_in_form"):
                email = st.text_input("E-mail")
                password = st.text_input("Password", type="password")
                if st.form_submit_button("Sign in"):
                    try:
                        auth.sign_in(email, password)
                        st.rerun()
                    except AuthError as exc:
                        st.error(str(exc))
        with sign_up_tab:
            with st.form("sign_up_form"):
                name = st.text_input("Name")
                email = st.text_input("E-mail", key="sign_up_email")
                password = st.text_input("Password", type="password", key="sign_up_password")
                if st.form_submit_button("Create account"):
                    try:
                        auth.sign_up(email, password, name)
                        st.rerun()
                    except AuthError as exc:
                        st.error(str(exc))
        return

    user = auth.user
    st.sidebar.markdown(f"### {user_initials(user.email)}")
    st.sidebar.write(f"**{display_name(user)}**")
    st.sidebar.caption(user.email)
    if st.sidebar.button("Sign out"):
        auth.sign_out()
        st.rerun()


def render_tag_editor() -> None:
    """Tag input outside the form so tags can be added one by one."""
    col1, col2 = st.columns([4, 1])
    with col1:
        candidate = st.text_input("Tags", placeholder="e.g. React, JavaScript, Frontend", key="tag_input")
    with col2:
        st.write("")
        if st.button("Add tag"):
            st.session_state.tags = add_tag(st.session_state.tags, candidate)

    if st.session_state.tags:
        cols = st.columns(min(len(st.session_state.tags), MAX_TAGS))
        for col, tag in zip(cols, list(st.session_state.tags)):
            with col:
                if st.button(f"{tag} ×", key=f"remove_tag_{tag}"):
                    st.session_state.tags = remove_tag(st.session_state.tags, tag)
                    st.rerun()


def queue_submission() -> None:
    """Form callback: lock the form and hand the draft to the next run."""
    state = st.session_state
    event_date = state.get("event_date")
    event_time = state.get("event_time")
    state.pending_draft = EventDraft(
        title=state.get("event_title", ""),
        description=state.get("event_description"),
        date=event_date.isoformat() if event_date else "",
        time=event_time.strftime("%H:%M") if event_time else "",
        location=state.get("event_location", ""),
        max_attendees=state.get("event_max_attendees"),
        organizer_name=state.get("event_organizer_name", ""),
        organizer_email=state.get("event_organizer_email", ""),
        image_url=state.get("event_image_url"),
        tags=list(state.tags),
    )
    state.submitting = True


def run_pending_submission() -> None:
    """Submit a queued draft; the form is already rendered disabled on this run."""
    draft = st.session_state.pending_draft
    if draft is None:
        return

    st.session_state.pending_draft = None
    try:
        with st.spinner("Creating event..."):
            result = submitter.submit(draft)
    finally:
        st.session_state.submitting = False

    if result.status == SubmissionStatus.CREATED:
        st.session_state.tags = []
    st.session_state.submission_result = result
    st.rerun()


def render_submission_result() -> None:
    result = st.session_state.submission_result
    if result is None:
        return
    st.session_state.submission_result = None

    for warning in result.warnings:
        st.warning(warning)

    if result.status == SubmissionStatus.CREATED:
        st.success(result.message)
        st.balloons()
    elif result.status == SubmissionStatus.VALIDATION_FAILED:
        st.error(result.message)
        for error in result.errors:
            st.write(f"- {error}")
    elif result.status == SubmissionStatus.AUTH_REQUIRED:
        st.warning(result.message)
    else:
        st.error(result.message)


def render_create_event() -> None:
    """Create-event form."""
    with st.expander("➕ Create Event", expanded=st.session_state.submitting or st.session_state.submission_result is not None):
        if not auth.is_authenticated:
            st.info("Sign in from the sidebar to create an event.")

        render_tag_editor()

        with st.form("create_event_form", clear_on_submit=False):
            st.text_input("Event Title *", placeholder="e.g. React Meetup São Paulo", key="event_title")
            st.text_area(
                "Description",
                placeholder="What will be discussed at the event...",
                key="event_description"
            )

            col1, col2 = st.columns(2)
            with col1:
                st.date_input("Date *", value=date.today() + timedelta(days=7), key="event_date")
            with col2:
                st.time_input("Time *", value=time(19, 0), key="event_time")

            st.text_input("Location *", placeholder="e.g. Av. Paulista, 1000 - São Paulo/SP", key="event_location")

            col3, col4 = st.columns(2)
            with col3:
                st.text_input("Max. Attendees", placeholder="50", key="event_max_attendees")
            with col4:
                st.text_input("Image URL", placeholder="https://example.com/image.jpg", key="event_image_url")

            col5, col6 = st.columns(2)
            with col5:
                st.text_input("Your Name *", placeholder="Jane Doe", key="event_organizer_name")
            with col6:
                st.text_input("Your E-mail *", placeholder="jane@example.com", key="event_organizer_email")

            # Set in the callback, so this run already renders the locked button
            st.form_submit_button(
                "Creating..." if st.session_state.submitting else "Create Event",
                disabled=st.session_state.submitting,
                on_click=queue_submission
            )

        run_pending_submission()
        render_submission_result()


def render_event_card(event) -> None:
    """One event card."""
    with st.container(border=True):
        if event.image_url:
            st.image(event.image_url, use_container_width=True)
        st.subheader(event.title)
        if event.description:
            st.caption(event.description[:160] + ("..." if len(event.description) > 160 else ""))
        st.write(f"📅 {format_event_datetime(event.date)}")
        st.write(f"📍 {event.location}")
        if event.max_attendees:
            st.write(f"👥 Max. {event.max_attendees} attendees")

        shown, hidden = visible_tags(event.tags)
        if shown:
            badges = " ".join(f"`{tag}`" for tag in shown)
            if hidden:
                badges += f" `+{hidden}`"
            st.markdown(badges)

        if st.button("View Details", key=f"details_{event.id}"):
            st.toast("Event details page coming soon!")


# Page
st.title("💻 Code Meet Hub")
st.markdown(
    "Connect with developers, learn new technologies and network with the tech community."
)

render_user_menu()
render_create_event()

feed = load_feed(auth.client)
if feed.error:
    st.error(feed.error)

# Stats
stat1, stat2, stat3 = st.columns(3)
stat1.metric("Available Events", len(feed.events))
stat2.metric("Organizers", len({e.organizer_name for e in feed.events}))
stat3.metric("Technologies", len({tag for e in feed.events for tag in (e.tags or [])}))

st.header("Upcoming Tech Events")
st.caption("Find meetups, workshops and conferences about the technologies you love")

if not feed.events:
    st.info("No events available yet. Be the first to create an amazing event for the community!")
else:
    view = st.radio("View", ["Cards", "Table"], horizontal=True, label_visibility="collapsed")
    if view == "Table":
        df = pd.DataFrame([
            {
                "Title": e.title,
                "Date": format_event_datetime(e.date),
                "Location": e.location,
                "Organizer": e.organizer_name,
                "Max. Attendees": e.max_attendees,
                "Tags": ", ".join(e.tags or []),
            }
            for e in feed.events
        ])
        st.dataframe(df, use_container_width=True)
    else:
        columns = st.columns(3)
        for index, event in enumerate(feed.events):
            with columns[index % 3]:
                render_event_card(event)

st.divider()
st.caption("Code Meet Hub · Connecting developers through great events")
