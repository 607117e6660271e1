import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from jinja2 import Environment, FileSystemLoader
from starlette.responses import HTMLResponse

from app.config import settings
from app.services.http_connector import HttpConnector
from app.views import search

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # one pooled client shared by every search request
    app.state.connector = HttpConnector()
    logger.info("%s started, searching %s", settings.app_name, settings.google_books_url)

    yield

    await app.state.connector.aclose()


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

# templates
templates_dir = Path(__file__).parent / "templates"
app.state.templates = Environment(loader=FileSystemLoader(str(templates_dir)), autoescape=True)


def _template_response(self, name, context, status_code=200):
    template = self.get_template(name)
    html = template.render(**context)
    return HTMLResponse(html, status_code=status_code)


app.state.templates.TemplateResponse = lambda name, ctx, status_code=200: _template_response(
    app.state.templates, name, ctx, status_code
)

# static files
static_dir = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")


@app.get("/health")
def health():
    return {"status": "ok"}


# routers
app.include_router(search.router)
