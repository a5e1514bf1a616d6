import logging
import os

import uvicorn

from echo_service.main import app

HOST = os.getenv("ECHO_HOST", "0.0.0.0")
PORT = int(os.getenv("ECHO_PORT", "8082"))
LOG_LEVEL = os.getenv("ECHO_LOG_LEVEL", "INFO").upper()


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger(__name__).info("Echo service starting on port %d", PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
