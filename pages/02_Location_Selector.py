# pages/02_Location_Selector.py
import requests
import streamlit as st

from flight_core.analysis.models import Location
from flight_core.errors import FlightDaysError
from flight_core.loaders.coords import validate_coordinates
from flight_core.loaders.geocode import search_places

st.title("Location — search a place in Norway")

mode = st.segmented_control(
    "Input mode",
    options=["Search", "Coordinates"],
    default="Search",
    key="sel_loc_mode",
)

if mode == "Search":
    query = st.text_input("Search for a location in Norway", key="sel_loc_query")
    if len(query.strip()) > 2:
        try:
            hits = search_places(query)
        except (FlightDaysError, requests.RequestException) as exc:
            st.error(f"Failed to geocode location: {exc}")
            hits = []

        if hits:
            labels = [h.display_name or f"{h.latitude:.4f}, {h.longitude:.4f}" for h in hits]
            ix = st.radio("Matches", range(len(hits)), format_func=lambda i: labels[i], key="sel_loc_hit")
            if st.button("Use this location", type="primary"):
                st.session_state["selected_location"] = hits[ix]
        elif query:
            st.info("No matches found.")
else:
    c1, c2 = st.columns(2)
    with c1:
        lat = st.number_input("Latitude", value=59.9139, format="%.4f")
    with c2:
        lon = st.number_input("Longitude", value=10.7522, format="%.4f")
    if st.button("Use these coordinates", type="primary"):
        try:
            lat, lon = validate_coordinates(lat, lon)
        except FlightDaysError as exc:
            st.error(str(exc))
        else:
            st.session_state["selected_location"] = Location(lat, lon)

loc = st.session_state.get("selected_location")
if loc is not None:
    st.success(
        f"**Location:** {loc.display_name or '(coordinates)'}  \n"
        f"**Lat/Lon:** {loc.latitude:.4f}, {loc.longitude:.4f}"
    )
    st.page_link("pages/10_Flight_Days_Analysis.py", label="Analyze flight days", icon=":material/flight:")
