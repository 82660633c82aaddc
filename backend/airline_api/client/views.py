"""Role pages of the Streamlit client.

Each page keeps its rows in ``st.session_state`` and reports outcomes through
one status message. Failed requests have already been reported by the
gateway, so actions only need to rerun.
"""
import streamlit as st

from airline_api.client.gateway import ApiRequestError, Gateway
from airline_api.client.router import ROUTE_KEY, home_route
from airline_api.client.rows import (
    normalize_aircraft,
    normalize_flight,
    normalize_passenger,
    normalize_ticket,
    to_frame,
)
from airline_api.models.enums import FlightStatus, SELF_REGISTER_ROLES, TicketClass

STATUS_KEY = "airline_status"

FLIGHT_COLUMNS = ("flight_num", "depart_time", "arrival_time", "origin", "destination", "status", "gate", "terminal")
TICKET_COLUMNS = ("ticket_num", "flight_num", "seat_num", "class", "status", "date_booked")
PASSENGER_COLUMNS = ("ssn", "first_name", "last_name", "passport_num", "email", "phone")
AIRCRAFT_COLUMNS = ("tail_number", "id", "model", "capacity", "status")

CLASS_OPTIONS = [c.value for c in TicketClass]
STATUS_OPTIONS = [s.value for s in FlightStatus]


def flash(message: str, kind: str = "info") -> None:
    st.session_state[STATUS_KEY] = {"message": message or "", "kind": kind}


def show_status(slot) -> None:
    status = st.session_state.get(STATUS_KEY)
    if not status or not status["message"]:
        return
    render = {"error": slot.error, "success": slot.success}.get(status["kind"], slot.info)
    render(status["message"])


def render_table(rows: list[dict], columns, empty: str) -> None:
    if not rows:
        st.info(empty)
        return
    st.dataframe(to_frame(rows, columns), width="stretch", hide_index=True)


def render_debug(gateway: Gateway) -> None:
    with st.expander("Debug"):
        st.caption(f"Last URL: {gateway.last_url}")
        st.caption(f"Last error: {gateway.last_error}")


# login

def render_login(gateway: Gateway) -> None:
    st.header("Login")
    tab_login, tab_register = st.tabs(["Login", "Register"])
    with tab_login:
        render_login_form(gateway)
    with tab_register:
        render_register_form(gateway)


def render_login_form(gateway: Gateway) -> None:
    with st.form("login_form"):
        username = st.text_input("Username", key="login_username")
        password = st.text_input("Password", type="password", key="login_password")
        submit = st.form_submit_button("Login", width="stretch")

    if submit:
        if not username.strip() or not password:
            flash("Please enter both username and password.", "error")
            st.rerun()
        try:
            session = gateway.login(username.strip(), password)
        except ApiRequestError:
            st.rerun()
        flash("Login successful.", "success")
        st.session_state[ROUTE_KEY] = home_route(session.role)
        st.rerun()


def render_register_form(gateway: Gateway) -> None:
    with st.form("register_form"):
        username = st.text_input("Username", key="reg_username")
        password = st.text_input("Password", type="password", key="reg_password")
        name = st.text_input("Full name", key="reg_name")
        email = st.text_input("Email", key="reg_email")
        role = st.selectbox("Role", [r.value for r in SELF_REGISTER_ROLES], key="reg_role")
        submit = st.form_submit_button("Register", width="stretch")

    if submit:
        if not all([username.strip(), password, name.strip(), email.strip()]):
            flash("Please fill in all fields.", "error")
            st.rerun()
        try:
            gateway.register(username.strip(), password, name.strip(), email.strip(), role)
        except ApiRequestError:
            st.rerun()
        flash("Registration successful. You can now login.", "success")
        st.rerun()


# passenger

def render_passenger(gateway: Gateway) -> None:
    st.header("Passenger")

    with st.form("flight_search"):
        c1, c2, c3 = st.columns(3)
        origin = c1.text_input("Origin", key="search_origin")
        destination = c2.text_input("Destination", key="search_destination")
        date = c3.text_input("Date (YYYY-MM-DD)", key="search_date")
        submit = st.form_submit_button("Search")
    if submit:
        try:
            rows = gateway.search_flights(origin.strip(), destination.strip(), date.strip())
        except ApiRequestError:
            st.rerun()
        st.session_state["passenger_results"] = [normalize_flight(r) for r in rows]
        flash(f"Found {len(rows)} flights.", "success")
        st.rerun()

    st.subheader("Flights")
    render_table(st.session_state.get("passenger_results", []), FLIGHT_COLUMNS, "No flights found.")

    with st.form("book_ticket"):
        c1, c2, c3 = st.columns(3)
        flight_num = c1.text_input("Flight number", key="book_flight_num")
        seat_num = c2.text_input("Seat", key="book_seat_num")
        ticket_class = c3.selectbox("Class", CLASS_OPTIONS, key="book_class")
        submit = st.form_submit_button("Book")
    if submit:
        if not flight_num.strip() or not seat_num.strip():
            flash("Flight number and seat are required.", "error")
            st.rerun()
        try:
            gateway.book_ticket(flight_num.strip(), seat_num.strip(), ticket_class)
        except ApiRequestError:
            st.rerun()
        flash("Ticket booked.", "success")
        st.rerun()

    st.subheader("My tickets")
    try:
        tickets = [normalize_ticket(r) for r in gateway.my_tickets()]
    except ApiRequestError:
        tickets = []
    render_table(tickets, TICKET_COLUMNS, "No tickets.")

    if tickets:
        with st.form("cancel_ticket"):
            ticket_num = st.selectbox("Ticket", [t["ticket_num"] for t in tickets], key="cancel_ticket_num")
            submit = st.form_submit_button("Cancel ticket")
        if submit:
            try:
                gateway.cancel_ticket(ticket_num)
            except ApiRequestError:
                st.rerun()
            flash(f"Ticket {ticket_num} cancelled.", "success")
            st.rerun()


# agent

def render_agent(gateway: Gateway) -> None:
    st.header("Agent")

    with st.form("passenger_lookup"):
        q = st.text_input("Passenger (name, ssn, passport or email)", key="lookup_q")
        submit = st.form_submit_button("Search")
    if submit and q.strip():
        try:
            rows = gateway.search_passengers(q.strip())
        except ApiRequestError:
            st.rerun()
        st.session_state["agent_passengers"] = [normalize_passenger(r) for r in rows]
        flash(f"Found {len(rows)} passengers.", "success")
        st.rerun()

    st.subheader("Passengers")
    render_table(st.session_state.get("agent_passengers", []), PASSENGER_COLUMNS, "No passengers found.")

    st.subheader("Book on behalf")
    with st.form("agent_booking"):
        passenger_query = st.text_input("Passenger", key="agent_passenger_query")
        c1, c2, c3 = st.columns(3)
        flight_num = c1.text_input("Flight number", key="agent_flight_num")
        seat_num = c2.text_input("Seat", key="agent_seat_num")
        ticket_class = c3.selectbox("Class", CLASS_OPTIONS, key="agent_class")
        submit = st.form_submit_button("Book for passenger")
    if submit:
        if not all([passenger_query.strip(), flight_num.strip(), seat_num.strip()]):
            flash("Passenger, flight number and seat are required.", "error")
            st.rerun()
        try:
            payload = gateway.book_on_behalf(passenger_query.strip(), flight_num.strip(), seat_num.strip(), ticket_class)
        except ApiRequestError:
            st.rerun()
        flash(f"Agent booking created: {(payload or {}).get('ticket_num', '')}.", "success")
        st.rerun()

    st.subheader("Refund")
    with st.form("agent_refund"):
        ticket_num = st.text_input("Ticket number", key="refund_ticket_num")
        submit = st.form_submit_button("Refund")
    if submit and ticket_num.strip():
        try:
            gateway.refund_ticket(ticket_num.strip())
        except ApiRequestError:
            st.rerun()
        flash(f"Refund requested for {ticket_num.strip()}.", "success")
        st.rerun()


# crew

def render_crew(gateway: Gateway) -> None:
    st.header("Crew")

    st.subheader("Schedule")
    try:
        schedule = [normalize_flight(r) for r in gateway.crew_schedule()]
    except ApiRequestError:
        schedule = []
    render_table(schedule, FLIGHT_COLUMNS[:6], "No schedule records.")

    if schedule:
        with st.form("flight_status"):
            c1, c2 = st.columns(2)
            flight_num = c1.selectbox("Flight", [f["flight_num"] for f in schedule], key="status_flight_num")
            new_status = c2.selectbox("Status", STATUS_OPTIONS, key="status_value")
            submit = st.form_submit_button("Update status")
        if submit:
            try:
                gateway.update_flight_status(flight_num, new_status)
            except ApiRequestError:
                st.rerun()
            flash(f"Updated {flight_num} to {new_status}.", "success")
            st.rerun()

    st.subheader("Report incident")
    with st.form("incident"):
        tail_number = st.text_input("Tail number", key="incident_tail_number")
        description = st.text_area("Description", key="incident_description")
        submit = st.form_submit_button("Submit incident")
    if submit:
        if not tail_number.strip() or not description.strip():
            flash("Tail number and description are required.", "error")
            st.rerun()
        try:
            payload = gateway.report_incident(tail_number.strip(), description.strip())
        except ApiRequestError:
            st.rerun()
        incident_num = (payload or {}).get("incident_num")
        flash(f"Incident {incident_num} submitted." if incident_num else "Incident submitted.", "success")
        st.rerun()


# admin

def render_admin(gateway: Gateway) -> None:
    st.header("Admin")

    try:
        flights = [normalize_flight(r) for r in gateway.admin_flights()]
    except ApiRequestError:
        flights = []
    try:
        aircraft = [normalize_aircraft(r) for r in gateway.admin_aircraft()]
    except ApiRequestError:
        aircraft = []

    st.subheader("Flights")
    render_table(flights, FLIGHT_COLUMNS + ("tail_number",), "No flights.")

    st.subheader("Create flight")
    with st.form("create_flight"):
        c1, c2, c3 = st.columns(3)
        flight_num = c1.text_input("Flight number", key="new_flight_num")
        origin = c2.text_input("Origin", key="new_origin")
        destination = c3.text_input("Destination", key="new_destination")
        depart_time = c1.text_input("Departure (ISO 8601)", key="new_depart_time")
        arrival_time = c2.text_input("Arrival (ISO 8601)", key="new_arrival_time")
        tail_number = c3.selectbox("Aircraft", [a["tail_number"] for a in aircraft], key="new_tail_number")
        status = c1.selectbox("Status", STATUS_OPTIONS, key="new_status")
        gate = c2.text_input("Gate", key="new_gate")
        terminal = c3.text_input("Terminal", key="new_terminal")
        submit = st.form_submit_button("Create flight")
    if submit:
        fields = {
            "flight_num": flight_num,
            "depart_time": depart_time,
            "arrival_time": arrival_time,
            "origin": origin,
            "destination": destination,
            "tail_number": tail_number,
            "status": status,
            "gate": gate,
            "terminal": terminal,
        }
        body = {k: v.strip() for k, v in fields.items() if v and v.strip()}
        try:
            gateway.create_flight(**body)
        except ApiRequestError:
            st.rerun()
        flash(f"Flight {body.get('flight_num', '')} created.", "success")
        st.rerun()

    st.subheader("Aircraft")
    render_table(aircraft, AIRCRAFT_COLUMNS, "No aircraft.")


PAGES = {
    "#/login": render_login,
    "#/passenger": render_passenger,
    "#/agent": render_agent,
    "#/crew": render_crew,
    "#/admin": render_admin,
}

