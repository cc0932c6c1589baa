#!/usr/bin/env python
"""
Wrapper script to run the face template comparison API with uvicorn.
"""
import uvicorn

from facecompare.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "facecompare.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
