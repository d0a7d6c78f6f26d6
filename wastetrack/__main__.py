"""Run the API with ``python -m wastetrack``."""

from wastetrack.main import run

run()
