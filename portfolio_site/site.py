"""
Portfolio page (Flask).

- Factory: create_site(config=None)
- Routes:
    GET  /               -> render index.html (hero, about, skills, projects, contact);
                            the hero refreshes its star field every BACKDROP_INTERVAL_MS
    POST /theme          -> flip light/dark, remember it in a cookie, back to /
    GET  /starfield.svg  -> hero backdrop rendered by the star field loop
- The contact form posts to the API service at API_URL.
- Display mode: "darkMode" cookie, else the browser's color-scheme hint, else light.
"""

from __future__ import annotations

import datetime as dt
import logging
import os
import random

from flask import Flask, make_response, redirect, render_template, request, url_for

from . import content
from .reveal import observer_for_sections
from .starfield import render_snapshot
from .theme import CLIENT_HINT, STORAGE_KEY, ThemePreference, prefers_dark_from_headers

ONE_YEAR = 365 * 24 * 3600


# ---------------- helpers ----------------

def _preference() -> tuple[ThemePreference, dict]:
    """Per-request preference backed by a copy of the cookies."""
    storage = dict(request.cookies)
    pref = ThemePreference(storage, lambda: prefers_dark_from_headers(request.headers))
    return pref, storage


def _int_arg(name: str, default: int, low: int, high: int) -> int:
    try:
        value = int(request.args.get(name, default))
    except (TypeError, ValueError):
        value = default
    return max(low, min(high, value))


# --------------- factory ---------------

def create_site(config: dict | None = None) -> Flask:
    app = Flask(__name__, template_folder="templates")
    app.config.update(
        TESTING=False,
        PORT=int(os.getenv("PORT", "3000")),
        API_URL=os.getenv("API_URL", "http://localhost:5000"),
        BACKDROP_FRAMES=120,
        BACKDROP_SEED=None,   # fixed seed -> identical backdrop every request
        BACKDROP_STEP=30,     # frames the page advances per refresh
        BACKDROP_INTERVAL_MS=500,
    )
    if config:
        app.config.update(config)

    @app.after_request
    def ask_for_color_scheme(resp):
        resp.headers.setdefault("Accept-CH", CLIENT_HINT)
        resp.headers.setdefault("Vary", CLIENT_HINT)
        return resp

    # --------------- routes ---------------

    @app.get("/")
    def index():
        """Render the single page."""
        pref, _ = _preference()
        seed = app.config["BACKDROP_SEED"]
        ctx = {
            "title": f"{content.PROFILE['name']} | Portfolio",
            "dark": pref.get(),
            "profile": content.PROFILE,
            "sections": content.SECTIONS,
            "reveal": observer_for_sections().settings(),
            "features": content.FEATURES,
            "stats": content.STATS,
            "skill_categories": content.SKILL_CATEGORIES,
            "competencies": content.COMPETENCIES,
            "featured": content.featured_projects(),
            "others": content.other_projects(),
            "api_url": app.config["API_URL"].rstrip("/"),
            # one seed per page view so each refresh continues the same sky
            "backdrop": {
                "seed": random.randrange(1, 2**31) if seed is None else int(seed),
                "frames": app.config["BACKDROP_FRAMES"],
                "step": app.config["BACKDROP_STEP"],
                "interval": app.config["BACKDROP_INTERVAL_MS"],
            },
            "year": dt.date.today().year,
        }
        return render_template("index.html", **ctx)

    @app.post("/theme")
    def toggle_theme():
        """Flip the display mode and persist it."""
        pref, storage = _preference()
        pref.toggle()
        resp = redirect(url_for("index"), code=303)
        resp.set_cookie(STORAGE_KEY, storage[STORAGE_KEY], max_age=ONE_YEAR, samesite="Lax")
        return resp

    @app.get("/starfield.svg")
    def starfield_svg():
        """One frame of the hero star field for the current display mode."""
        pref, _ = _preference()
        seed = request.args.get("seed", app.config["BACKDROP_SEED"])
        svg = render_snapshot(
            width=_int_arg("width", 1280, 16, 3840),
            height=_int_arg("height", 720, 16, 2160),
            dark=pref.get(),
            frames=_int_arg("frames", app.config["BACKDROP_FRAMES"], 1, 600),
            seed=int(seed) if str(seed).lstrip("-").isdigit() else None,
        )
        resp = make_response(svg)
        resp.headers["Content-Type"] = "image/svg+xml"
        resp.headers["Cache-Control"] = "no-store"
        return resp

    return app


def main() -> None:
    """Run the page with Flask's development server."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_site()
    app.logger.info("Site running on port %s (API at %s)", app.config["PORT"], app.config["API_URL"])
    app.run(host="0.0.0.0", port=app.config["PORT"])


if __name__ == "__main__":
    main()
