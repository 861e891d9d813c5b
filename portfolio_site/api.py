"""
Portfolio contact API (Flask).

- Factory: create_app(config=None)
- Routes:
    GET  /              -> service banner
    GET  /api/health    -> {"status", "timestamp", "uptime"}
    POST /api/contact   -> validate, store (best effort), email (best effort)
    GET  /api/contacts  -> latest 50 submissions, newest first
    anything else       -> 404 {"success": false, "message": "Route not found"}
- Demo mode: no DATABASE_URL (or unreachable DB) -> submissions accepted, not saved
- Dependency Injection via app.config: STORE, MAILER, GENERAL_LIMITER,
  CONTACT_LIMITER, CLOCK
"""

from __future__ import annotations

import datetime as dt
import logging
import os
import time
from types import SimpleNamespace

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from . import __version__
from .content import PROFILE
from .mailer import Mailer
from .ratelimit import FixedWindowLimiter
from .storage import ContactRecord, connect_store
from .validation import validate_contact

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}

CONTACT_LIMIT_MESSAGE = "Too many contact form submissions, please try again later."
GENERAL_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."


# ---------------- helpers ----------------

def _env_bool(name: str) -> bool:
    return os.getenv(name, "").strip().lower() == "true"


def _client_ip() -> str:
    return request.remote_addr or ""


def _rate_limited(result, message: str):
    body = jsonify({"success": False, "message": message})
    resp = body, 429, {
        "Retry-After": str(int(result.reset_in) + 1),
        "X-RateLimit-Limit": str(result.limit),
        "X-RateLimit-Remaining": "0",
    }
    return resp


def _payload() -> dict:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


# --------------- factory ---------------

def create_app(config: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config.update(
        TESTING=False,
        MAX_CONTENT_LENGTH=10 * 1024 * 1024,
        ENV_NAME=os.getenv("FLASK_ENV", "development"),
        PORT=int(os.getenv("PORT", "5000")),
        CLIENT_URL=os.getenv("CLIENT_URL", "http://localhost:3000"),
        DATABASE_URL=os.getenv("DATABASE_URL"),
        EMAIL_SERVICE=os.getenv("EMAIL_SERVICE"),
        EMAIL_USER=os.getenv("EMAIL_USER"),
        EMAIL_PASS=os.getenv("EMAIL_PASS"),
        SMTP_HOST=os.getenv("SMTP_HOST", "localhost"),
        SMTP_PORT=int(os.getenv("SMTP_PORT", "587")),
        SMTP_SECURE=_env_bool("SMTP_SECURE"),
        RECIPIENT_EMAIL=os.getenv("RECIPIENT_EMAIL"),
        OWNER_NAME=os.getenv("OWNER_NAME", PROFILE["name"]),
        # DI hooks (tests or prod can provide these):
        STORE=None,            # .save(ContactRecord), .latest(limit) ; None -> built from DATABASE_URL
        MAILER=None,           # .send_contact(ContactRecord) ; None -> built from EMAIL_* settings
        GENERAL_LIMITER=None,  # FixedWindowLimiter for every route
        CONTACT_LIMITER=None,  # FixedWindowLimiter for POST /api/contact
        CLOCK=time.monotonic,  # uptime clock
    )
    if config:
        app.config.update(config)

    if app.config["STORE"] is None and "STORE" not in (config or {}):
        app.config["STORE"] = connect_store(app.config["DATABASE_URL"])
    if app.config["MAILER"] is None and "MAILER" not in (config or {}):
        app.config["MAILER"] = Mailer.from_config(app.config)
    if app.config["GENERAL_LIMITER"] is None:
        app.config["GENERAL_LIMITER"] = FixedWindowLimiter(100, message=GENERAL_LIMIT_MESSAGE)
    if app.config["CONTACT_LIMITER"] is None:
        app.config["CONTACT_LIMITER"] = FixedWindowLimiter(5, message=CONTACT_LIMIT_MESSAGE)

    CORS(app, origins=[app.config["CLIENT_URL"]], supports_credentials=True)

    app.state = SimpleNamespace(started=app.config["CLOCK"]())

    # --------------- middleware ---------------

    @app.before_request
    def general_limit():
        limiter = app.config["GENERAL_LIMITER"]
        result = limiter.hit(_client_ip())
        if not result.allowed:
            return _rate_limited(result, limiter.message)
        return None

    @app.after_request
    def security_headers(resp):
        for name, value in SECURITY_HEADERS.items():
            resp.headers.setdefault(name, value)
        return resp

    # --------------- routes ---------------

    @app.get("/")
    def banner():
        return jsonify({"message": "Portfolio API Server", "version": __version__, "status": "running"})

    @app.get("/api/health")
    def health():
        """Liveness probe."""
        return jsonify({
            "status": "OK",
            "timestamp": dt.datetime.now(dt.timezone.utc).isoformat().replace("+00:00", "Z"),
            "uptime": app.config["CLOCK"]() - app.state.started,
        }), 200

    @app.post("/api/contact")
    def contact():
        """Accept one contact submission.

        Storage and email are side effects: their failures are logged and
        the submitter still gets a success response.
        """
        limiter = app.config["CONTACT_LIMITER"]
        result = limiter.hit(_client_ip())
        if not result.allowed:
            return _rate_limited(result, limiter.message)

        try:
            fields, errors = validate_contact(_payload())
            if errors:
                return jsonify({"success": False, "message": "Validation failed", "errors": errors}), 400

            record = ContactRecord(ip_address=_client_ip(), **fields)

            store = app.config["STORE"]
            if store is not None:
                try:
                    store.save(record)
                    app.logger.info("Contact saved to database")
                except Exception:
                    app.logger.exception("Contact storage error; message accepted without saving")
            else:
                app.logger.info(
                    "Contact received (demo mode - not saved to database): name=%s email=%s subject=%s",
                    record.name, record.email, record.subject,
                )

            mailer = app.config["MAILER"]
            if mailer is not None:
                try:
                    mailer.send_contact(record)
                except Exception:
                    app.logger.exception("Email sending error")

            return jsonify({"success": True, "message": "Message sent successfully!"}), 200
        except Exception:
            app.logger.exception("Contact form error")
            return jsonify({
                "success": False,
                "message": "An error occurred while sending your message. Please try again.",
            }), 500

    @app.get("/api/contacts")
    def contacts():
        """Latest submissions (admin view)."""
        store = app.config["STORE"]
        if store is None:
            return jsonify({"success": True, "count": 0, "data": []}), 200
        try:
            rows = store.latest(50)
        except Exception:
            app.logger.exception("Get contacts error")
            return jsonify({"success": False, "message": "Error retrieving contacts"}), 500
        return jsonify({"success": True, "count": len(rows), "data": [r.to_dict() for r in rows]}), 200

    # --------------- errors ---------------

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(_err):
        return jsonify({"success": False, "message": "Route not found"}), 404

    @app.errorhandler(Exception)
    def unexpected(err):
        if isinstance(err, HTTPException):
            return jsonify({"success": False, "message": err.description}), err.code
        app.logger.exception("Unhandled error")
        return jsonify({"success": False, "message": "Something went wrong!"}), 500

    return app


def main() -> None:
    """Run the API with Flask's development server."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    port = app.config["PORT"]
    app.logger.info("Server running on port %s", port)
    app.logger.info("Environment: %s", app.config["ENV_NAME"])
    app.logger.info(
        "Database: %s",
        "Connected" if app.config["STORE"] is not None else "Disconnected (running in demo mode)",
    )
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
