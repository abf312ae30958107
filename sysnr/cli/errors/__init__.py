from .error_handler import cli_sysnr_error_handler

__all__ = ["cli_sysnr_error_handler"]
