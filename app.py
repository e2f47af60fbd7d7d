import logging
from dotenv import load_dotenv

# ---------- SETUP ----------
load_dotenv()

from products_api import create_app
from products_api.config import Config

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = create_app()


# ---------- START ----------
def main():
    host = app.config["HOST"]
    port = app.config["PORT"]
    logger.info(f"Server running on http://localhost:{port}")
    app.run(host=host, port=port, threaded=True)


if __name__ == '__main__':
    main()
