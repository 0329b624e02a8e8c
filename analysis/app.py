"""
app.py

A Streamlit dashboard for launch catalog analytics.
- Loads providers, rockets and launches through the catalog ETL classes
- Shows the snapshot as tables
- Runs every RocketMiner query with user-chosen parameters
- Plots launches per country
"""
from datetime import date

import plotly.express as px
import streamlit as st

from rockets.config import CATALOG_SOURCE, DEFAULT_TOP_K, REPORT_ORBIT, catalog_location
from rockets.dataaccess import InMemoryRepository
from rockets.flows.etl_flow import CATALOG_KINDS
from rockets.mining import MiningError, RocketMiner
from rockets.models import Launch, LaunchServiceProvider, Rocket
from rockets.utils.frames import (
    launches_frame,
    launches_per_country,
    providers_frame,
    rockets_frame,
)

# -------------------------
# Page config
# -------------------------
st.set_page_config(page_title="Rocket Launch Insights", layout="wide")
st.title("🚀 Rocket Launch Insights")
st.markdown(
    "Rankings and aggregations over the launch catalog. "
    "Every query re-reads the full snapshot."
)


# -------------------------
# Helpers: load catalog
# -------------------------
@st.cache_resource(show_spinner=True)
def load_catalog(source: str) -> InMemoryRepository:
    """
    Run extract, transform and load for every record kind, in reference order.
    """
    repository = InMemoryRepository()
    for etl_cls, kind_name in CATALOG_KINDS.values():
        etl = etl_cls(repository)
        etl.load(etl.transform(etl.extract(catalog_location(kind_name, source))))
    return repository


def show_query(title: str, query, render=st.dataframe):
    st.markdown(f"**{title}**")
    try:
        result = query()
    except MiningError as e:
        st.warning(str(e))
        return
    render(result)


source = st.sidebar.text_input("Catalog source (URL or directory)", value=CATALOG_SOURCE)
repository = load_catalog(source)
miner = RocketMiner(repository)

launches = repository.load_all(Launch)
df_launches = launches_frame(launches)

# -------------------------
# Data preview (left column) + Queries (right column)
# -------------------------
col1, col2 = st.columns([1, 2])

with col1:
    st.header("Catalog")
    st.markdown(f"**Launches:** {len(df_launches)}")
    st.dataframe(df_launches.astype({"price": str}))
    st.markdown("**Rockets**")
    st.dataframe(rockets_frame(repository.load_all(Rocket)))
    st.markdown("**Launch service providers**")
    st.dataframe(providers_frame(repository.load_all(LaunchServiceProvider)))

with col2:
    st.header("Queries")

    k = st.number_input("k", min_value=0, value=DEFAULT_TOP_K, step=1)
    orbit_options = sorted(df_launches["orbit"].unique().tolist()) or [REPORT_ORBIT]
    orbit = st.selectbox(
        "Orbit",
        options=orbit_options,
        index=orbit_options.index(REPORT_ORBIT) if REPORT_ORBIT in orbit_options else 0,
    )
    year = st.number_input("Year", value=date.today().year, step=1)
    country = st.text_input("Country", value="USA")

    k = int(k)
    year = int(year)

    show_query(
        "Most launched rockets",
        lambda: rockets_frame(miner.most_launched_rockets(k)),
    )
    show_query(
        "Most reliable launch service providers",
        lambda: providers_frame(miner.most_reliable_launch_service_providers(k)),
    )
    show_query(
        "Most recent launches",
        lambda: launches_frame(miner.most_recent_launches(k)).astype({"price": str}),
    )
    show_query(
        "Most expensive launches",
        lambda: launches_frame(miner.most_expensive_launches(k)).astype({"price": str}),
    )
    show_query(
        f"Highest revenue providers in {year}",
        lambda: providers_frame(miner.highest_revenue_launch_service_providers(k, year)),
    )
    show_query(
        f"Dominant country in {orbit}",
        lambda: miner.dominant_country(orbit),
        render=st.success,
    )
    show_query(
        f"Successful launch rate in {year}",
        lambda: str(miner.successful_launch_rate_in_year(year)),
        render=st.success,
    )
    show_query(
        f"Launches from {country}",
        lambda: launches_frame(miner.launches_from_country(country)).astype({"price": str}),
    )

    st.subheader("Launches per country")
    fig = px.bar(launches_per_country(launches), x="country", y="launches")
    st.plotly_chart(fig, use_container_width=True)
