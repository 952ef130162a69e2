#!/usr/bin/env python3
"""Start the L-System Generator API server."""

import uvicorn

from lsystem3d import config

if __name__ == "__main__":
    uvicorn.run(
        "lsystem3d.api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=True,
        reload_dirs=["lsystem3d"],
        log_level=config.LOG_LEVEL.lower(),
    )
