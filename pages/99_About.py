# pages/99_About.py
import streamlit as st

from flight_core.config import DATA_SOURCE, YEARS

st.set_page_config(page_title="About", layout="wide")
st.title("About this app")

st.markdown(
    f"""
This app estimates how many **drone flight days** a year you get at a location in **Norway**,
from the last **{YEARS} years** of daily weather (ERA5 via Open-Meteo).
"""
)

st.divider()


st.subheader("How a flight day is decided")
st.markdown(
    """
For every day in the window the app checks three limits you set:

1. daily **precipitation** (mm) ≤ maximum rain
2. daily **mean wind speed** at 10 m (m/s) ≤ maximum mean wind
3. daily **maximum gust** at 10 m (m/s) ≤ maximum gusts

Days are grouped by calendar year. Each year gets a flight-day count plus rain and wind summaries;
the yearly counts are then averaged and their **population** standard deviation (÷N) reported.
"""
)


st.subheader("Quick links")
st.page_link("pages/01_Home.py", label="Home", icon=":material/home:")
st.page_link("pages/02_Location_Selector.py", label="Location", icon=":material/location_on:")
st.page_link("pages/10_Flight_Days_Analysis.py", label="Flight Days", icon=":material/flight:")

st.divider()


st.subheader("Data sources")
st.markdown(
    f"""
- **{DATA_SOURCE}**: daily `precipitation_sum`, `wind_speed_10m_mean`, `wind_gusts_10m_max` (Europe/Oslo days).
  Requested on-demand; nothing is stored.
- **OpenStreetMap Nominatim**: place search, limited to Norway.

> Known approximation: a missing reading counts as 0 (calm / dry), so data gaps can inflate flight-day counts.
"""
)

st.caption("Built with Streamlit + Plotly.")
