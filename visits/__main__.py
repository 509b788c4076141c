import logging

from visits.app import create_app
from visits.config import Config
from visits.store import CounterStore, CounterStoreError, connect

log = logging.getLogger("visits")


def main():
    config = Config.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("werkzeug").setLevel(logging.ERROR)

    store = CounterStore(connect(config), key=config.counter_key)
    try:
        store.reset()
    except CounterStoreError as e:
        log.warning("could not initialize counter: %s", e)

    app = create_app(store)
    log.info("Listening on port %d", config.port)
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
