"""
Run the patient API under uvicorn.
Run with: python -m patient_service
"""

import argparse
import uvicorn
from patient_service.config import get_settings


def main():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Patient dashboard API server")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    args = parser.parse_args()

    print(f"Server is running at http://{args.host}:{args.port}")
    uvicorn.run("patient_service.main:app", host=args.host, port=args.port, reload=args.reload,
                log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
