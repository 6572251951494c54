# run_dev.py
"""
Local development launcher for FastAPI.
Equivalent to: `uvicorn docgen.app:app --reload --host 0.0.0.0 --port 8000`
Set INFERENCE_BACKEND=echo to run without an inference API key.
"""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "docgen.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
