"""Cancel tokens bound to the Streamlit script run that started a simulated task."""
from contextlib import contextmanager

import streamlit as st

from remediation_studio.tasks import CancelToken

KEY_PREFIX = "task_"


def cancel_stale_tasks():
    """Cancel every token left behind by an earlier script run.

    Called at the top of each run, before any section starts a task, so any
    token still in session_state belongs to a run that no longer owns the page.
    """
    for key in [k for k in st.session_state if str(k).startswith(KEY_PREFIX)]:
        token = st.session_state[key]
        if isinstance(token, CancelToken):
            token.cancel()
        del st.session_state[key]


@contextmanager
def task_scope(name: str):
    """Yield a fresh token for one section task.

    The token is cancelled if the scope is left by an exception, including
    Streamlit's rerun and stop signals, and is dropped from session_state
    when the scope ends.
    """
    key = KEY_PREFIX + name
    previous = st.session_state.get(key)
    if isinstance(previous, CancelToken):
        previous.cancel()

    token = CancelToken()
    st.session_state[key] = token
    try:
        yield token
    except BaseException:
        token.cancel()
        raise
    finally:
        if st.session_state.get(key) is token:
            del st.session_state[key]
