"""
Memo form component for Streamlit
Collects a title and a dd/mm/aaaa date, validates the date and creates the memo
"""
import logging
from datetime import date
from typing import Callable, Optional

import streamlit as st

from memo_ui.services.memo_service import MemoServiceError
from memo_ui.validation import validate_memo_date, validate_memo_title

logger = logging.getLogger(__name__)

TITLE_KEY = "memo_form_title"
DATE_KEY = "memo_form_date"
ERROR_KEY = "memo_form_error"


class MemoForm:
    """
    Controlled form state

    title/date_text mirror the inputs; error holds the single message shown
    under the form. Fields are cleared only after create_memo returns.
    """

    def __init__(self, service, today: Optional[Callable[[], date]] = None):
        self.service = service
        self.today = today or date.today
        self.title = ""
        self.date_text = ""
        self.error: Optional[str] = None

    def submit(self) -> bool:
        """Validate and create; returns True when a memo was created"""
        self.error = (
            validate_memo_title(self.title)
            or validate_memo_date(self.date_text, today=self.today())
        )
        if self.error:
            logger.debug(f"Memo form rejected {self.title!r} {self.date_text!r}: {self.error}")
            return False

        try:
            self.service.create_memo({"title": self.title, "created_at": self.date_text})
        except MemoServiceError as e:
            self.error = e.message
            return False

        self.title = ""
        self.date_text = ""
        return True


def _on_submit(form: MemoForm, on_created: Optional[Callable[[], None]]):
    # Widget keys may only be written from callbacks, before the rerun draws them
    form.title = st.session_state.get(TITLE_KEY, "")
    form.date_text = st.session_state.get(DATE_KEY, "")

    created = form.submit()

    st.session_state[ERROR_KEY] = form.error
    if created:
        st.session_state[TITLE_KEY] = form.title
        st.session_state[DATE_KEY] = form.date_text
        if on_created:
            on_created()


def render_memo_form(service, on_created: Optional[Callable[[], None]] = None):
    """
    Render the memo form

    Args:
        service: object with create_memo({title, created_at})
        on_created: called after a memo was created (e.g. to refresh a list)
    """
    form = MemoForm(service)

    col1, col2 = st.columns([3, 1])
    with col1:
        st.text_input(
            "Lembrete",
            key=TITLE_KEY,
            placeholder="Adicione o lembrete",
            label_visibility="collapsed"
        )
    with col2:
        st.text_input(
            "Data",
            key=DATE_KEY,
            placeholder="dd/mm/aaaa",
            label_visibility="collapsed"
        )

    st.button("Adicionar", on_click=_on_submit, args=(form, on_created))

    error = st.session_state.get(ERROR_KEY)
    if error:
        st.error(error)
