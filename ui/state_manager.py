from __future__ import annotations
import os, sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
import streamlit as st

from site_admin.config import AdminConfig
from site_admin.core.document import DocumentEditor
from site_admin.core.sync import SyncController
from site_admin.logging_setup import configure_logging
from ui.api_client import ApiClient


def ensure_defaults() -> None:
    if "config" not in st.session_state:
        cfg = AdminConfig()
        configure_logging(cfg.log_level)
        st.session_state.config = cfg
    if "api" not in st.session_state:
        cfg = st.session_state.config
        st.session_state.api = ApiClient(base_url=cfg.api_base, timeout=cfg.request_timeout)
    if "controller" not in st.session_state:
        st.session_state.controller = SyncController(st.session_state.api)
        st.session_state.controller.reload()
    if "document_editor" not in st.session_state:
        st.session_state.document_editor = DocumentEditor(st.session_state.api)
        st.session_state.document_editor.load()
    if "search" not in st.session_state:
        st.session_state.search = ""


def get_controller() -> SyncController:
    return st.session_state.controller


def get_document_editor() -> DocumentEditor:
    return st.session_state.document_editor


def widget_key(path: str, lang: str) -> str:
    return f"field::{lang}::{path}"


def clear_field_widgets() -> None:
    # Widget values outlive a reload; drop them so inputs show the fresh store
    for key in [k for k in st.session_state.keys() if str(k).startswith("field::")]:
        del st.session_state[key]


def on_field_change(path: str, lang: str) -> None:
    get_controller().update_value(path, lang, st.session_state[widget_key(path, lang)])


def on_save_field(path: str) -> None:
    get_controller().save_field(path)


def on_save_all() -> None:
    get_controller().save_all()


def on_reload() -> None:
    clear_field_widgets()
    get_controller().reload()
