import os, sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
import streamlit as st

from site_admin.core.field_store import is_dirty
from site_admin.core.models import LANGS, FieldRecord, FieldStatus
from site_admin.core.view import use_textarea
from ui.state_manager import on_field_change, on_save_field, widget_key


def render_field(path: str, record: FieldRecord, disabled: bool = False) -> None:
    multiline = use_textarea(record.ru) or use_textarea(record.uz)
    with st.container(border=True):
        head, btn = st.columns([5, 1])
        head.code(path, language=None)
        label = "Saving…" if record.status is FieldStatus.SAVING else "Save"
        btn.button(
            label,
            key=f"save::{path}",
            on_click=on_save_field,
            args=(path,),
            disabled=disabled or not is_dirty(record),
        )
        cols = st.columns(2)
        for col, lang in zip(cols, LANGS):
            key = widget_key(path, lang)
            if key not in st.session_state:
                st.session_state[key] = record.draft(lang)
            kwargs = dict(key=key, on_change=on_field_change, args=(path, lang), help=f"type: {record.kind(lang).value}")
            if multiline:
                col.text_area(lang.upper(), height=100, **kwargs)
            else:
                col.text_input(lang.upper(), **kwargs)
        if record.error:
            st.error(record.error)
        elif record.status is FieldStatus.SAVED:
            st.caption("Saved")
