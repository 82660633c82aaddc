"""Streamlit entry point of the airline operations client.

Run with ``airline-client`` or ``streamlit run airline_api/client/app.py``.
"""
import streamlit as st

from airline_api.client import views
from airline_api.client.config import API_BASE_URL, PAGE_ICON, PAGE_TITLE
from airline_api.client.gateway import Gateway
from airline_api.client.router import LOGIN_ROUTE, ROUTE_KEY, resolve_route
from airline_api.client.session_store import SessionStore

GATEWAY_KEY = "airline_gateway"
# Optional prepared httpx.Client, used instead of one built from API_BASE_URL
HTTP_KEY = "airline_http"


def get_gateway() -> Gateway:
    state = st.session_state
    if GATEWAY_KEY not in state:
        state[GATEWAY_KEY] = Gateway(API_BASE_URL, store=SessionStore(state), http=state.get(HTTP_KEY))
    gateway = state[GATEWAY_KEY]
    gateway.on_error = lambda message: views.flash(message, "error")
    return gateway


def main():
    """Guard the requested route, then render the sidebar, the page and the status message."""
    st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout="wide")
    gateway = get_gateway()
    session = gateway.store.load()

    route, message = resolve_route(st.session_state.get(ROUTE_KEY), session)
    st.session_state[ROUTE_KEY] = route
    if message:
        views.flash(message, "error" if route == LOGIN_ROUTE else "info")

    with st.sidebar:
        st.title(f"{PAGE_ICON} {PAGE_TITLE}")
        if session.is_authenticated:
            st.write(f"Welcome, **{session.name or session.role}**")
        st.caption(f"Role: {session.role or 'guest'}")
        if session.is_authenticated and st.button("Logout", key="logout", width="stretch"):
            gateway.logout()
            views.flash("Logged out.", "info")
            st.session_state[ROUTE_KEY] = LOGIN_ROUTE
            st.rerun()

    status_slot = st.empty()
    views.PAGES[route](gateway)
    views.render_debug(gateway)
    views.show_status(status_slot)


if __name__ == "__main__":
    main()
