import os, sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from typing import Any
import streamlit as st

from site_admin.core.paths import join_path
from site_admin.core.view import field_label
from ui.state_manager import ensure_defaults, get_document_editor

# NOTE: Page config is set once in ui/app.py
ensure_defaults()
editor = get_document_editor()

st.title("Sayt kontentini tahrirlash")
st.write(
    "Bu yerda siz saytdagi barcha matnlarni tahrirlashingiz mumkin. "
    "O'zgarishlar ikki til uchun qo'llaniladi: rus tili va o'zbek tili."
)

if editor.error:
    st.error(editor.error)
    if st.button("Qayta yuklash"):
        editor.load()
        st.rerun()
    st.stop()
if editor.data is None:
    st.write("Ma'lumot yo'q")
    st.stop()


def render_tree(node: Any, path: str, depth: int = 0) -> None:
    items = node.items() if isinstance(node, dict) else enumerate(node)
    for key, value in items:
        child = join_path(path, key)
        label = field_label(str(key))
        if isinstance(value, str):
            new = st.text_area(
                label,
                value=value,
                key=f"doc::{child}",
                height=120 if len(value) > 50 else 68,
                help=child,
            )
            if new != value:
                editor.set_value(child, new)
        elif isinstance(value, (dict, list)):
            if depth == 0:
                st.subheader(label)
            else:
                st.markdown(f"**{label}**")
            render_tree(value, child, depth + 1)


tab_ru, tab_uz = st.tabs(["Rus tili (RU)", "O'zbek tili (UZ)"])
with tab_ru:
    render_tree(editor.data["i18n"].get("ru") or {}, "i18n.ru")
with tab_uz:
    render_tree(editor.data["i18n"].get("uz") or {}, "i18n.uz")

msg_col, btn_col = st.columns([4, 1])
with btn_col:
    if st.button("Saqlash", type="primary", disabled=editor.sending):
        editor.save()
with msg_col:
    if editor.message:
        if editor.message.startswith("Xato") or editor.problems():
            st.error(editor.message)
        else:
            st.success(editor.message)
