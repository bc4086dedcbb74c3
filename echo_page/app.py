# -*- coding: utf-8 -*-

import argparse
import logging
from wsgiref.handlers import CGIHandler
from wsgiref.simple_server import make_server

from webob import Request, Response

from .config import Settings, configure_logging
from .template import escape, global_wrapper, render_page

logger = logging.getLogger(__name__)


# -------- Handlers --------
def request_content(request: Request) -> str:
    headers = "".join(
        f"<li><b>{escape(key)}: </b>{escape(value)}</li>"
        for key, value in request.headers.items()
    )
    body = request.body.decode("utf-8", errors="replace")
    return (
        f"<p><b>Url: </b>{escape(request.url)}</p>"
        f"<ul>{headers}</ul>"
        "<h1>Body</h1>"
        f"<pre>{escape(body)}</pre>"
    )


def handle_request(request: Request, settings=None) -> Response:
    if settings is None:
        settings = Settings.from_environ()
    logger.debug("%s %s", request.method, request.url)
    content = request_content(request)
    return render_page(global_wrapper(settings.title, content, brand=settings.brand))


def handle_error(error: Exception) -> Response:
    return Response(
        body=f"Error: {type(error).__name__} ".encode("utf-8"),
        status=500,
        content_type="text/plain",
        charset="UTF-8",
    )


def application(environ, start_response):
    request = Request(environ)
    try:
        response = handle_request(request, Settings.from_environ(environ))
    except Exception as e:
        logger.exception("Failed to render %s", request.path)
        response = handle_error(e)
    return response(environ, start_response)


# -------- Main --------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Echo the request back as an HTML page.")
    parser.add_argument("--serve", action="store_true", help="run a local development server instead of CGI")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    configure_logging(Settings.from_environ().log_level)

    if args.serve:
        with make_server(args.host, args.port, application) as server:
            logger.warning("Serving on http://%s:%d/", args.host, args.port)
            server.serve_forever()
    else:
        CGIHandler().run(application)


if __name__ == "__main__":
    main()
