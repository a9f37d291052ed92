"""
Error handling utilities.
"""
from .logging_config import get_logger
from .exceptions import PatternShowcaseError


logger = get_logger(__name__)


class ErrorContext:
    """
    Context manager that logs the start, end or failure of a named operation.

    Failures are logged with their structured details and always re-raised.
    """

    def __init__(self, operation_name: str):
        self.operation_name = operation_name
        self.logger = get_logger(__name__)

    def __enter__(self):
        self.logger.info(f"Starting operation: {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.info(f"Completed operation: {self.operation_name}")
        elif isinstance(exc_val, PatternShowcaseError):
            self.logger.error(
                f"{exc_type.__name__} in operation {self.operation_name}: {exc_val}",
                extra={'error_details': exc_val.to_dict()}
            )
        else:
            self.logger.error(
                f"Error in operation {self.operation_name}: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb)
            )
        return False
