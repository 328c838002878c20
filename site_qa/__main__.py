"""Позволяет запускать ``python -m site_qa run --base ... --out ...``."""
from site_qa.cli import cli

if __name__ == "__main__":
    cli(prog_name="site-qa")
