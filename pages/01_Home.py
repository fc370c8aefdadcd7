# pages/01_Home.py
import streamlit as st


st.title("Drone Weather Analyzer")
st.caption("How many days a year can you fly a drone at a Norwegian location? Answered from 5 years of Open-Meteo ERA5 history.")


# Primary CTA
st.divider()
st.page_link(
    "pages/02_Location_Selector.py",
    label="Set / Change Location (recommended first step)",
    icon=":material/location_on:",
)
st.divider()


st.markdown(
    """
### What this app does
- **Search** a place in Norway (OpenStreetMap Nominatim) and pick it as the active location.
- **Set** your drone's limits: maximum daily rain, maximum mean wind and maximum gusts.
- **Count** the flyable days in each of the last five years and summarise them (average ± standard deviation).
- **Inspect** the yearly rain and wind statistics behind the counts.
"""
)

with st.expander("Quick start", expanded=True):
    st.markdown(
        """
1) Go to **Location** and search for a town or area.
2) Open **Flight Days**, adjust the thresholds and press **Analyze**.
3) Read the average, the ±1 std range and the per-year table.
        """
    )


st.subheader("🛩️ Analysis")
st.page_link("pages/10_Flight_Days_Analysis.py", label="Flight Days — thresholds & yearly statistics", icon=":material/flight:")

active = st.session_state.get("selected_location")
if active is not None:
    st.info(f"Active location: **{active.display_name or f'{active.latitude:.4f}, {active.longitude:.4f}'}**")
