"""Development server entry point: ``python -m ozone_coin``."""

from __future__ import annotations

import logging

from ozone_coin import create_app

log = logging.getLogger(__name__)


def main() -> None:
    app = create_app()
    port = int(app.config.get("PORT", 3001))
    log.info("Backend API running on http://localhost:%s", port)
    app.run(host="0.0.0.0", port=port, debug=app.config.get("DEBUG", False))


if __name__ == "__main__":
    main()
