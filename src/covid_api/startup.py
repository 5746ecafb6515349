"""Early-boot side effects: dotenv and logging.

This module is imported before any other covid_api modules so that
environment variables from ``.env`` are visible when configuration is read.
"""

import logging

from dotenv import load_dotenv

# -- Load .env ------------------------------------------------------------------
load_dotenv()

# -- covid_api / third-party logging setup --------------------------------------
covid_logger = logging.getLogger("covid_api")
covid_logger.setLevel(logging.INFO)
if not covid_logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    covid_logger.addHandler(handler)
covid_logger.propagate = False

logging.getLogger("httpx").setLevel(logging.WARNING)
