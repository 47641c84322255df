# FILE: memo_ui/app.py
"""
Memo UI - Streamlit front end for the Memo API

Run with: streamlit run memo_ui/app.py
"""
import sys
from pathlib import Path

import streamlit as st

# Add the project root directory to sys.path so `streamlit run` finds the packages
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from memo_ui.config import configure_logging, get_ui_settings
from memo_ui.components.memo_form import render_memo_form
from memo_ui.services.memo_service import MemoService, MemoServiceError

settings = get_ui_settings()
configure_logging()

STATUS_LABELS = {"pendente": "⏳ pendente", "feito": "✅ feito"}


@st.cache_resource
def get_memo_service() -> MemoService:
    return MemoService(settings.memo_api_url, timeout=settings.memo_api_timeout)


def _toggle_status(service: MemoService, memo: dict):
    new_status = "pendente" if memo["status"] == "feito" else "feito"
    try:
        service.update_memo(memo["id"], title=memo["title"], status=new_status)
    except MemoServiceError as e:
        st.session_state["memo_list_error"] = e.message


def _delete(service: MemoService, memo_id: int):
    try:
        service.delete_memo(memo_id)
    except MemoServiceError as e:
        st.session_state["memo_list_error"] = e.message


def render_memo_list(service: MemoService):
    """Memos in creation order, each with a status toggle and a delete button"""
    error = st.session_state.pop("memo_list_error", None)
    if error:
        st.error(error)

    try:
        memos = service.list_memos()
    except MemoServiceError as e:
        st.warning(f"Não foi possível carregar os lembretes: {e.message}")
        return

    if not memos:
        st.info("Nenhum lembrete ainda.")
        return

    for memo in memos:
        col1, col2, col3, col4 = st.columns([4, 2, 1, 1])
        with col1:
            st.markdown(f"**{memo['title']}**")
        with col2:
            st.caption(f"{STATUS_LABELS.get(memo['status'], memo['status'])} · {memo['created_at']}")
        with col3:
            st.button(
                "Concluir" if memo["status"] == "pendente" else "Reabrir",
                key=f"memo_toggle_{memo['id']}",
                on_click=_toggle_status,
                args=(service, memo)
            )
        with col4:
            st.button(
                "Excluir",
                key=f"memo_delete_{memo['id']}",
                on_click=_delete,
                args=(service, memo["id"])
            )


def main():
    st.set_page_config(page_title="Memos", page_icon="📝")
    st.title("📝 Lembretes")

    service = get_memo_service()
    render_memo_form(service)
    st.divider()
    render_memo_list(service)


main()
