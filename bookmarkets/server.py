import json
import logging
import os
import time

import flask

from . import database, graph
from .config import Settings
from .logging_config import setup_logging


_logger = logging.getLogger(__name__)


def local_path(path):
    return os.path.join(os.path.dirname(__file__), path)


def create_app(settings=None, store=None):
    if settings is None:
        settings = Settings()
    if store is None:
        store = database.sample_store()

    if settings.check_integrity:
        store.check_integrity()

    app = flask.Flask(__name__)
    app.config["DEBUG"] = settings.debug

    @app.before_request
    def start_timer():
        flask.g.start_time = time.monotonic()

    @app.after_request
    def add_response_time(response):
        start_time = getattr(flask.g, "start_time", None)
        if start_time is not None:
            elapsed_ms = int((time.monotonic() - start_time) * 1000)
            response.headers["X-Response-Time"] = "{}ms".format(elapsed_ms)
            _logger.info("response time: %sms", elapsed_ms)
        return response

    @app.route("/")
    def graphiql():
        with open(local_path("static/graphiql.html"), encoding="utf-8") as fileobj:
            return fileobj.read().replace("{{graphql_path}}", settings.graphql_path)

    @app.route(settings.graphql_path, methods=["GET", "POST"])
    def graphql():
        try:
            query, variables = _read_graphql_request(flask.request)
        except ValueError as error:
            return flask.jsonify({"errors": [{"message": str(error)}]}), 400

        response = graph.execute(query, store=store, variables=variables)

        body = {"data": response.data}
        if response.errors:
            body["errors"] = response.errors
        return flask.jsonify(body)

    return app


def _read_graphql_request(request):
    if request.method == "POST":
        body = request.get_json(silent=True)
        if body is None:
            body = {}
        if not isinstance(body, dict):
            raise ValueError("request body must be a JSON object")
        query = body.get("query")
        variables = body.get("variables") or {}
    else:
        query = request.args.get("query")
        variables = request.args.get("variables")
        if variables:
            try:
                variables = json.loads(variables)
            except json.JSONDecodeError:
                raise ValueError("variables must be a JSON object")
        else:
            variables = {}

    if not isinstance(query, str) or not query:
        raise ValueError("must provide query string")
    if not isinstance(variables, dict):
        raise ValueError("variables must be a JSON object")

    return query, variables


def main():
    settings = Settings()
    setup_logging(settings.log_level)

    app = create_app(settings)
    _logger.info("Server ready at http://%s:%s%s", settings.host, settings.port, settings.graphql_path)
    app.run(host=settings.host, port=settings.port)
