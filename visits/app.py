import logging

from flask import Flask
from prometheus_client import CollectorRegistry, Counter, generate_latest, CONTENT_TYPE_LATEST
from werkzeug.routing import Rule

from visits.store import CounterStoreError

log = logging.getLogger(__name__)


def _route_any_method(app, rule, endpoint, view, **options):
    # methods=None: werkzeug matches every verb, Flask's route() would default to GET
    app.url_map.add(Rule(rule, endpoint=endpoint, methods=None, **options))
    app.view_functions[endpoint] = view


def create_app(store, registry=None):
    app = Flask(__name__, static_folder=None)
    registry = registry or CollectorRegistry()
    visits = Counter("visits_total", "Requests served by the counter route", registry=registry)
    store_errors = Counter(
        "counter_store_errors_total",
        "Failed counter store operations",
        ["operation"],
        registry=registry,
    )

    def health():
        return "OK", 200

    @app.get("/metrics")
    def metrics():
        return generate_latest(registry), 200, {"Content-Type": CONTENT_TYPE_LATEST}

    def home(path):
        visits.inc()
        try:
            count = store.get()
        except CounterStoreError as e:
            # missing, corrupt and unreachable all read as zero
            log.warning("counter read failed (%s): %s", e.kind, e)
            store_errors.labels(operation="read").inc()
            count = 0
        body = f"Number of visits is {count}"
        # runs in the request thread before returning; the outcome is never checked
        try:
            store.set(count + 1)
        except CounterStoreError as e:
            log.debug("counter write dropped: %s", e)
            store_errors.labels(operation="write").inc()
        return body, 200

    _route_any_method(app, "/health", "health", health)
    _route_any_method(app, "/", "home", home, defaults={"path": ""})
    _route_any_method(app, "/<path:path>", "home", home)

    return app
