# src/ui/pages/home.py
from src.ui.context import st, safe_rerun, navigate, settings, COURSES, JOBS, LOGIN, ROLE_HOME
from src.ui.session import optional_session

FEATURES = [
    ("Smart Job Matching", "Find roles that fit the skills you already have."),
    ("Skill Development", "Close the gap with courses built around employer demand."),
    ("Professional Network", "Share progress and connect with companies."),
]


def home_page(store, client):
    context = optional_session(store)
    st.title(settings.APP_TITLE)
    st.write("Bridge the gap between learning and employment.")

    c1, c2, c3 = st.columns(3)
    if c1.button("Browse Jobs", key="home_jobs", use_container_width=True):
        navigate(store, JOBS)
        safe_rerun()
    if c2.button("Explore Courses", key="home_courses", use_container_width=True):
        navigate(store, COURSES)
        safe_rerun()
    if context is None:
        if c3.button("Log in", key="home_login", use_container_width=True):
            navigate(store, LOGIN)
            safe_rerun()
    elif c3.button("My Dashboard", key="home_dash", use_container_width=True):
        navigate(store, ROLE_HOME.get(context.role, JOBS))
        safe_rerun()

    st.write("---")
    st.subheader("Platform Features")
    cols = st.columns(len(FEATURES))
    for col, (title, text) in zip(cols, FEATURES):
        with col:
            st.markdown(f"**{title}**")
            st.caption(text)
