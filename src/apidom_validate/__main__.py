"""Allow ``python -m apidom_validate``."""

from apidom_validate.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="apidom-validate")
