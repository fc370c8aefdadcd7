# pages/10_Flight_Days_Analysis.py
import plotly.express as px
import requests
import streamlit as st

from flight_core.analysis.flight_days import analyze_daily_frame
from flight_core.analysis.models import Thresholds
from flight_core.config import DEFAULT_THRESHOLDS, YEARS
from flight_core.errors import FlightDaysError
from flight_core.loaders.weather import load_trailing_daily

st.title("Flight Days — thresholds & yearly statistics")
st.caption(f"Counts the days in the last {YEARS} years where rain, mean wind and gusts are all within your limits.")

loc = st.session_state.get("selected_location")
if loc is None:
    st.warning("Please select a location first.")
    st.page_link("pages/02_Location_Selector.py", label="Choose location", icon=":material/location_on:")
    st.stop()

st.caption(f"Active location → **{loc.display_name or f'{loc.latitude:.4f}, {loc.longitude:.4f}'}**")
st.page_link("pages/02_Location_Selector.py", label="Change location", icon=":material/location_on:")


# Thresholds
st.subheader("Weather thresholds")
c1, c2, c3 = st.columns(3)
with c1:
    max_rain = st.number_input("Maximum rain (mm/day)", min_value=0.0, max_value=50.0,
                               value=float(DEFAULT_THRESHOLDS["maxRain"]), step=0.5)
with c2:
    max_wind = st.number_input("Maximum mean wind speed (m/s)", min_value=0.0, max_value=30.0,
                               value=float(DEFAULT_THRESHOLDS["maxWind"]), step=0.5)
with c3:
    max_gust = st.number_input("Maximum wind gusts (m/s)", min_value=0.0, max_value=40.0,
                               value=float(DEFAULT_THRESHOLDS["maxWindGusts"]), step=0.5)

if st.button("Analyze", type="primary"):
    try:
        with st.spinner(f"Analyzing {YEARS} years of weather data..."):
            daily = load_trailing_daily(loc.latitude, loc.longitude, years=YEARS)
            st.session_state["flight_result"] = analyze_daily_frame(
                daily, Thresholds(max_rain, max_wind, max_gust), location=loc
            )
    except (FlightDaysError, requests.RequestException) as exc:
        st.error(f"Failed to analyze flight days. Please try again.  \n_{exc}_")

res = st.session_state.get("flight_result")
if res is None or res.location != loc:
    st.stop()


# Results
st.subheader("Analysis results")
st.caption(f"Based on {res.years_analyzed} years of historical weather data. Data source: {res.data_source}")

lo, hi = res.flight_day_range()
m1, m2, m3, m4 = st.columns(4)
m1.metric("Average flight days", res.average_flight_days, help="days per year")
m2.metric("Standard deviation", res.standard_deviation, help="days")
m3.metric("Flight day range", f"{lo} – {hi}", help="±1 std dev")
m4.metric("Data analyzed", f"{res.total_days_analyzed:,}", help="days total")

th = res.thresholds
st.markdown(
    f"""
- Maximum rain: **{th.max_rain} mm/day**
- Maximum mean wind: **{th.max_wind} m/s** (daily average at 10 m height)
- Maximum wind gusts: **{th.max_wind_gusts} m/s** (peak gusts during the day)
"""
)

yearly = res.yearly_frame()
fig = px.bar(
    yearly,
    x="Year",
    y="Flight Days",
    title="Flight days per year",
)
fig.update_xaxes(type="category")
fig.add_hline(y=res.average_flight_days, line_dash="dash", annotation_text="average")
fig.update_layout(margin=dict(t=50, r=10, b=10, l=10))
st.plotly_chart(fig, use_container_width=True)

st.subheader("Historical weather data by year")
st.dataframe(yearly, use_container_width=True, hide_index=True)

st.download_button(
    "Download yearly statistics (CSV)",
    data=yearly.to_csv(index=False).encode("utf-8"),
    file_name="flight_days_yearly.csv",
    mime="text/csv",
)


with st.expander("Notes"):
    st.markdown(
        f"""
- A day counts only if **rain, mean wind AND gusts** are all at or below your limits.
- Wind is converted from km/h to m/s. Missing readings are treated as **0** (calm / dry), which can
  slightly overstate flight days where the archive has gaps.
- You can expect about **{res.average_flight_days}** flight days per year here, typically between **{lo}** and **{hi}**.
        """
    )
