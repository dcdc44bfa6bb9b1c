#!/usr/bin/env python3
"""
FastAPI server runner for the Travel Advisor backend
"""

import uvicorn
from travel_advisor.api import app

if __name__ == "__main__":
    uvicorn.run(
        "travel_advisor.api:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload for development
        log_level="info"
    )
