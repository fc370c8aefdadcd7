# app.py
from pathlib import Path
import streamlit as st

from flight_core.config import setup_logging

setup_logging()
st.set_page_config(page_title="Drone Weather Analyzer", page_icon="🛩️", layout="wide")

pages: dict[str, list] = {}

# Helper to add pages
def add(section: str, path: str, title: str, icon: str):
    if Path(path).exists():
        pages.setdefault(section, []).append(st.Page(path, title=title, icon=icon))


# Overview
add("Overview", "pages/01_Home.py", "Home", ":material/home:")
add("Overview", "pages/02_Location_Selector.py", "Location", ":material/location_on:")
add("Overview", "pages/99_About.py", "About", ":material/info:")


# Analysis
add("Analysis", "pages/10_Flight_Days_Analysis.py", "Flight Days", ":material/flight:")


pg = st.navigation(pages, position="sidebar", expanded=True)
pg.run()
