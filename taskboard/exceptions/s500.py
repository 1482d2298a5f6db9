
import inspect
import logging

from .base import BaseCustomHTTPException

logger = logging.getLogger(__name__)


class SendFeedbackToAdminException(BaseCustomHTTPException):
    """Raised when a repository write returns nothing; the caller frame goes to the log."""

    def __init__(self):
        current_frame = inspect.currentframe()
        outer_frame = current_frame.f_back if current_frame else None
        if outer_frame:
            logger.error("Storage returned no record in %s (%s:%d)",
                         outer_frame.f_code.co_name,
                         outer_frame.f_code.co_filename,
                         outer_frame.f_lineno)
        super().__init__(500, "Unexpected storage error occurred. "
                              "Please contact the administrator for assistance.")
