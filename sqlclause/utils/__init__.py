from sqlclause.utils.logging import configure_logging, get_logger, log_with_context

__all__ = ("configure_logging", "get_logger", "log_with_context")
