"""Allow ``python -m nomi_mcp``."""

from nomi_mcp.cli import app

app()
