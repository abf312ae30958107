"""Entry point for CLI.

Only for calling via `python -m sysnr`, installed `sysnr` script is preferred.
"""

from sysnr.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
