"""Server entry point: python -m panelsim"""

from __future__ import annotations

import uvicorn

from panelsim.config import PanelSimConfig
from panelsim.observability.logging import setup_logging


def main() -> None:
    config = PanelSimConfig.from_yaml()
    setup_logging(config.log_level)

    uvicorn.run(
        "panelsim.app:create_app",
        factory=True,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
