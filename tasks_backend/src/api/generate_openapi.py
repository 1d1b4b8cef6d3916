"""
Utility script to generate and write the OpenAPI document for the ToDo list API.

This script builds the application and serializes the same document that is
served at /openapi-spec.json, so that API clients and documentation tools can
consume a stable description without running the server.

Usage:
    python -m src.api.generate_openapi [output_path]

Notes:
- Without an argument the document is written to OPENAPI_OUTPUT_PATH
  (default: interfaces/openapi-spec.json under the container root).
"""
from __future__ import annotations

import json
import os
import sys
from typing import List, Optional

from .logging_config import get_logger
from .main import create_app
from .settings import get_settings

logger = get_logger(__name__)


# PUBLIC_INTERFACE
def generate_openapi(output_path: Optional[str] = None) -> str:
    """Write the OpenAPI document as pretty JSON and return the written file path."""
    settings = get_settings()
    out_path = os.path.abspath(output_path or settings.openapi_output_path)
    os.makedirs(os.path.dirname(out_path), exist_ok=True)

    schema = create_app(settings).openapi()
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
        f.write("\n")
    logger.info("Wrote OpenAPI document to %s", out_path)
    return out_path


def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    out_path = generate_openapi(args[0] if args else None)
    print(f"Wrote OpenAPI document to: {out_path}")


if __name__ == "__main__":
    main()
