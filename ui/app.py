import os, sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
import streamlit as st

from site_admin.core.view import filter_paths, group_by_first_segment
from ui.components.field_editor import render_field
from ui.components.fields_overview import render_overview
from ui.state_manager import ensure_defaults, get_controller, on_reload, on_save_all

st.set_page_config(page_title="Site i18n Admin", layout="wide")
ensure_defaults()
ctl = get_controller()

st.title("Site i18n Admin")
st.caption(f"API: {st.session_state.config.api_base}")

bar = st.columns([4, 1, 1])
with bar[0]:
    search = st.text_input("Search", key="search", placeholder="Search key/value...", label_visibility="collapsed")
with bar[1]:
    st.button(
        "Saving all…" if ctl.is_saving_all else f"Save All ({ctl.dirty_count})",
        type="primary",
        on_click=on_save_all,
        disabled=ctl.is_loading or ctl.is_saving_all or ctl.dirty_count == 0,
    )
with bar[2]:
    st.button("Reload", on_click=on_reload, disabled=ctl.is_loading or ctl.is_saving_all)

if ctl.is_loading:
    st.info("Loading site data…")
if ctl.load_error:
    st.error(ctl.load_error)
    st.stop()
if ctl.global_message:
    st.success(ctl.global_message)

tab_edit, tab_table = st.tabs(["Fields", "Overview"])

with tab_edit:
    groups = group_by_first_segment(filter_paths(ctl.fields, search))
    if not groups:
        st.write("No fields found.")
    for group_name, paths in groups:
        with st.expander(f"{group_name} ({len(paths)})", expanded=len(groups) == 1):
            for path in paths:
                render_field(path, ctl.fields[path], disabled=ctl.is_saving_all)

with tab_table:
    render_overview(ctl.fields)
