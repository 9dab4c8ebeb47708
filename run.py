"""
File: run.py
Purpose: Starts one of the sites on its fixed address.

    python run.py                  # counseling site on :8000
    python run.py --site basic     # basic site on :8080
"""
import argparse
import logging

from counseling_site.app_factory import create_app
from counseling_site.config import CONFIGS, DEFAULT_SITE

logger = logging.getLogger('counseling_site.run')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Serve the counseling practice websites.')
    parser.add_argument('--site', choices=sorted(CONFIGS), default=DEFAULT_SITE,
                        help='site variant to serve (default: %(default)s)')
    parser.add_argument('--debug', action='store_true', help='run Flask in debug mode')
    parser.add_argument('--verbose', action='store_true', help='log at DEBUG level')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = CONFIGS[args.site]

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    app = create_app(args.site, {'DEBUG': True} if args.debug else None)
    host, port = app.config['HOST'], app.config['PORT']

    logger.info("Starting %s site on http://localhost:%s", args.site, port)
    # Werkzeug reports a failed bind itself and calls sys.exit(1)
    try:
        app.run(host=host, port=port, debug=app.config['DEBUG'])
    except SystemExit as err:
        if err.code in (0, None):
            raise
        logger.critical("Server on %s:%s could not start (exit code %s)", host, port, err.code)
        raise SystemExit(1) from err
    except Exception as err:
        logger.critical("Server on %s:%s stopped: %s", host, port, err)
        raise SystemExit(1) from err


if __name__ == '__main__':
    main()
