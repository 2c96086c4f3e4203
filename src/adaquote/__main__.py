"""Adaquote entrypoint.

Run with:
  python -m adaquote
"""

import os
import uvicorn

def main() -> None:
    host = os.getenv("ADAQUOTE_HOST", "0.0.0.0")
    port = int(os.getenv("ADAQUOTE_PORT", "8000"))
    reload = os.getenv("ADAQUOTE_RELOAD", "false").lower() in {"1", "true", "yes", "y"}
    uvicorn.run("adaquote.app:create_app", factory=True, host=host, port=port, reload=reload)

if __name__ == "__main__":
    main()
