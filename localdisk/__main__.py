"""Allow ``python -m localdisk``."""
from localdisk.cli import app

app(prog_name="localdisk")
