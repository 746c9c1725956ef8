from .error_handler import cli_hackforge_error_handler

__all__ = ["cli_hackforge_error_handler"]
