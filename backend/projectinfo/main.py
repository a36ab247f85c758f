from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from . import __version__
from .api import projectinfo

app = FastAPI(
    title="Project Info Service",
    description="Owner, languages and top committers of a GitHub repository.",
    version=__version__,
)

# --- Mount Routers ---

app.include_router(projectinfo.router, prefix="/projectinfo/v1", tags=["Project Info"])

@app.get("/", response_class=PlainTextResponse, tags=["System"])
def hello():
    return "Hi\n"
