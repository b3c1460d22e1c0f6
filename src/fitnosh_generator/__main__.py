"""Run with: python -m fitnosh_generator"""

import uvicorn

from fitnosh_generator.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "fitnosh_generator.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
    )
