from .main import EXIT_FATAL, EXIT_LOOKUP_FAILED, EXIT_SUCCESS, main

__all__ = ["EXIT_FATAL", "EXIT_LOOKUP_FAILED", "EXIT_SUCCESS", "main"]
