"""
Streamlit Frontend — Zetelverdeling Tweede Kamer
=================================================
Landelijke uitslag, regionale uitslagen en een wat-als-zetelcalculator
"""

import streamlit as st
import pandas as pd

from zetelverdeling.config import AVAILABLE_ELECTIONS, DEFAULT_ELECTION, TOTAL_SEATS
from zetelverdeling.data.api_client import ApiError
from zetelverdeling.data.loader import ResultsLoader
from zetelverdeling.engine.national import (
    build_party_records,
    parties_from_rows,
    results_table,
    summarize,
)
from zetelverdeling.viz.charts import national_result_bar, seats_comparison
from zetelverdeling.viz.hemicycle import plot_hemicycle


st.set_page_config(
    page_title="Zetelverdeling Tweede Kamer",
    layout="wide",
)

TABLE_CONFIG = {
    "logo": st.column_config.ImageColumn("Logo", width="small"),
    "party": "Partij",
    "votes": st.column_config.NumberColumn("Stemmen", format="%d"),
    "percentage": st.column_config.NumberColumn("Stempercentage", format="%.2f%%"),
    "seats": "Zetels",
    "color": None,
}


@st.cache_resource
def get_loader() -> ResultsLoader:
    return ResultsLoader()


def show_table(table: pd.DataFrame, with_seats: bool = True):
    columns = ["logo", "party", "votes", "percentage"] + (["seats"] if with_seats else [])
    st.dataframe(
        table[columns],
        column_config=TABLE_CONFIG,
        hide_index=True,
        use_container_width=True,
    )


st.title("Tweede Kamerverkiezingen")

loader = get_loader()
election_id = st.sidebar.selectbox(
    "Verkiezing",
    AVAILABLE_ELECTIONS,
    index=AVAILABLE_ELECTIONS.index(DEFAULT_ELECTION),
)
st.sidebar.caption(loader.client.get_scaled_results_message())

tab1, tab2, tab3 = st.tabs(["Landelijk", "Regionaal", "Zetelcalculator"])


# =============================================================================
# LANDELIJKE UITSLAG
# =============================================================================

summary = None
try:
    with st.spinner(f"Uitslag {election_id} ophalen..."):
        summary = loader.load_summary(election_id)
except ApiError as exc:
    tab1.error(str(exc))

with tab1:
    if summary is not None:
        largest_name, largest_seats = summary.largest_party
        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Totaal zetels", summary.total_seats)
        col2.metric("Meerderheid", summary.majority_threshold)
        col3.metric("Partijen", summary.party_count)
        col4.metric(
            "Grootste partij",
            f"{largest_name} : {largest_seats}",
            summary.largest_party_percentage,
            delta_color="off",
        )

        table = results_table(summary.records, include_logo=True)
        if table.empty:
            st.info("Geen partijdata voor deze verkiezing.")
        else:
            st.plotly_chart(national_result_bar(table, election_id), use_container_width=True)
            st.pyplot(plot_hemicycle(summary.seats, title=f"Tweede Kamer — {election_id}"))
            show_table(table)


# =============================================================================
# REGIONALE UITSLAG : Nederland → provincie → kieskring, en gemeenten
# =============================================================================

with tab2:
    st.subheader("Nederland")
    try:
        tree = loader.province_tree()
        constituencies = loader.constituency_records(election_id)
    except ApiError as exc:
        st.error(str(exc))
    else:
        if not tree:
            st.info("Geen provincies gevonden.")
        for province, kieskringen in tree.items():
            with st.expander(f"{province} ({len(kieskringen)} kieskringen)", expanded=False):
                for kieskring in kieskringen:
                    records = constituencies.get(kieskring, [])
                    st.markdown(f"**Kieskring {kieskring}**")
                    if not records:
                        st.caption("Geen uitslag")
                        continue
                    show_table(results_table(records, include_logo=True), with_seats=False)

    st.subheader("Gemeente")
    try:
        names = loader.client.get_municipality_names()
    except ApiError as exc:
        st.error(str(exc))
        names = []

    if names:
        municipality = st.selectbox("Gemeente", names)
        try:
            records = loader.municipality_records(municipality)
        except ApiError as exc:
            st.error(str(exc))
        else:
            table = results_table(records, include_logo=True)
            if table.empty:
                st.info("Geen uitslag voor deze gemeente.")
            else:
                st.plotly_chart(
                    national_result_bar(
                        table, election_id,
                        title=f"Gemeente {municipality}: Stempercentage",
                        show_seats=False,
                    ),
                    use_container_width=True,
                )
                show_table(table, with_seats=False)


# =============================================================================
# WAT-ALS CALCULATOR
# =============================================================================

with tab3:
    st.header("Zetelcalculator (D'Hondt)")
    st.caption(
        "Bij exact gelijke quotiënten gaat de zetel naar de partij die het hoogst "
        "in de tabel staat."
    )

    default_rows = (
        [{"name": r.name, "votes": r.votes} for r in summary.records]
        if summary is not None and summary.records
        else [{"name": "Partij A", "votes": 500_000}, {"name": "Partij B", "votes": 300_000}]
    )
    edited = st.data_editor(
        pd.DataFrame(default_rows),
        num_rows="dynamic",
        use_container_width=True,
        key=f"calculator_{election_id}",
    )
    seats_to_allocate = st.number_input("Aantal zetels", min_value=1, value=TOTAL_SEATS, step=1)

    try:
        parties = parties_from_rows(edited.dropna().to_dict("records"))
        records = build_party_records(parties, int(seats_to_allocate))
    except ValueError as exc:
        st.error(f"Ongeldige invoer : {exc}")
    else:
        scenario = summarize(records, "wat-als")
        show_table(results_table(records, include_logo=True))
        if summary is not None and summary.records:
            st.plotly_chart(
                seats_comparison({election_id: summary.seats, "Wat-als": scenario.seats}),
                use_container_width=True,
            )
