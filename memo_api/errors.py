"""
Memo domain errors
Each error carries the message and HTTP status it is rendered with
"""


class MemoError(Exception):
    """Base exception for memo operations"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MemoNotFoundError(MemoError):
    """Memo id is not in the store"""
    status_code = 404


class MemoBadRequestError(MemoError):
    """Request cannot be applied to the store"""
    status_code = 400


NOT_FOUND_MESSAGE = "Memo not found"
STATUS_MANDATORY_MESSAGE = 'The field "status" is mandatory.'
