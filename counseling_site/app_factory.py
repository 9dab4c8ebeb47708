"""
File: app_factory.py
Purpose: Builds the Flask application for one site variant.
"""
import time

from flask import Flask, g, request

from counseling_site.config import CONFIGS, DEFAULT_SITE
from counseling_site.errors import PageRenderError, UnknownSiteError


def _blueprint_for(site):
    if site == 'counseling':
        from counseling_site.routes.counseling_routes import counseling_bp
        return counseling_bp
    from counseling_site.routes.basic_routes import basic_bp
    return basic_bp


def create_app(site=DEFAULT_SITE, config_overrides=None):
    """
    Creates the app for `site` ('counseling' or 'basic').
    Static files are served by the site's own routes, so Flask's /static is disabled.
    """
    if site not in CONFIGS:
        raise UnknownSiteError(f"unknown site {site!r}; expected one of {', '.join(sorted(CONFIGS))}")

    app = Flask(__name__, static_folder=None)
    app.config.from_object(CONFIGS[site])
    if config_overrides:
        app.config.update(config_overrides)

    app.register_blueprint(_blueprint_for(site))
    register_request_logging(app)
    register_error_handlers(app)
    return app


# --- Request Info ---
def register_request_logging(app):
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        if app.config['LOG_REQUESTS']:
            started = g.get('request_started')
            elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
            app.logger.info("%s %s %s (%.1f ms)", request.method, request.path,
                            response.status_code, elapsed_ms)
        return response


# --- Errors ---
def register_error_handlers(app):
    @app.errorhandler(PageRenderError)
    def page_render_failed(err):
        # No error page: the client just gets an empty 500
        app.logger.error("%s: %r", err, err.__cause__)
        return '', 500
