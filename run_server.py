# -*- coding: utf-8 -*-
"""Start the comparison service from the repository root"""
import os
import uvicorn

BACKEND_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'backend')

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        app_dir=BACKEND_DIR,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5055")),
    )
