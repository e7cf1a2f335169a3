import logging
from flask import Flask
from flask_cors import CORS

from .config import LOG_LEVEL, PARAMHUB_HOST, PARAMHUB_PORT, PARAMHUB_TOKEN
from .routes import settings_bp, system_bp

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)

app.config["PARAMHUB_TOKEN"] = PARAMHUB_TOKEN
app.json.sort_keys = False

app.register_blueprint(system_bp)
app.register_blueprint(settings_bp)


@app.after_request
def add_security_headers(response):
    """Add security headers to all responses"""
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "no-referrer"
    return response


# Started with `python -m paramhub.app` or the `paramhub` console script
def main():
    logger.info(f"Starting parameter settings service on {PARAMHUB_HOST}:{PARAMHUB_PORT}")
    app.run(host=PARAMHUB_HOST, port=PARAMHUB_PORT, debug=(LOG_LEVEL == logging.DEBUG))


if __name__ == "__main__":
    main()
