from __future__ import annotations

from fastapi import APIRouter
from fastapi.openapi.docs import get_redoc_html, get_swagger_ui_html
from fastapi.responses import HTMLResponse

OPENAPI_URL = "/openapi-spec.json"

PICO_CSS_URL = "https://cdn.jsdelivr.net/npm/@picocss/pico@next/css/pico.classless.min.css"
REDOC_JS_URL = "https://cdn.redoc.ly/redoc/latest/bundles/redoc.standalone.js"
SWAGGER_JS_URL = "https://unpkg.com/swagger-ui-dist@4.5.0/swagger-ui-bundle.js"
SWAGGER_CSS_URL = "https://unpkg.com/swagger-ui-dist@4.5.0/swagger-ui.css"

# Pages are static templates; they are kept out of the generated document.
router = APIRouter(include_in_schema=False)

_LANDING_PAGE = f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Sample ToDo list API</title>
    <link rel="stylesheet" href="{PICO_CSS_URL}" />
  </head>
  <body>
    <main>
      <h1>Sample ToDo list API</h1>
      <p>
        You can find API reference in either <a href="/docs/redoc">Redoc</a> style or
        <a href="/docs/swagger">Swagger UI</a> style.
      </p>
    </main>
  </body>
</html>
"""


# PUBLIC_INTERFACE
@router.get("/", response_class=HTMLResponse)
def landing_page() -> HTMLResponse:
    """Landing page linking to both API reference viewers."""
    return HTMLResponse(_LANDING_PAGE)


# PUBLIC_INTERFACE
@router.get("/docs/redoc", response_class=HTMLResponse)
def redoc_page() -> HTMLResponse:
    """Redoc viewer loading the generated document client-side."""
    return get_redoc_html(
        openapi_url=OPENAPI_URL,
        title="Sample ToDo API | Redoc",
        redoc_js_url=REDOC_JS_URL,
        with_google_fonts=False,
    )


# PUBLIC_INTERFACE
@router.get("/docs/swagger", response_class=HTMLResponse)
def swagger_page() -> HTMLResponse:
    """Swagger UI viewer loading the generated document client-side."""
    return get_swagger_ui_html(
        openapi_url=OPENAPI_URL,
        title="Sample ToDo API | SwaggerUI",
        swagger_js_url=SWAGGER_JS_URL,
        swagger_css_url=SWAGGER_CSS_URL,
    )
