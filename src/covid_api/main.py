"""COVID-19 regional statistics API.

covid_api.startup is imported first so that ``.env`` values and logging are
in place before configuration is read.
"""

import covid_api.startup  # noqa: F401  # isort: skip

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from covid_api.routers import regions, root, views

app = FastAPI(title="COVID-19 Regional Statistics API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root.router)
app.include_router(regions.router)
app.include_router(views.router)
