import os, sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
import streamlit as st

from site_admin.core.models import FieldStore
from site_admin.core.view import fields_frame


def render_overview(store: FieldStore) -> None:
    df = fields_frame(store)
    if df.empty:
        st.info("No fields loaded")
        return
    only_dirty = st.toggle("Only changed fields", value=False)
    if only_dirty:
        df = df[df["dirty"]]
    st.dataframe(df, use_container_width=True, hide_index=True)
    st.download_button(
        "Download CSV",
        data=df.to_csv(index=False),
        file_name="site_fields.csv",
        mime="text/csv",
    )
