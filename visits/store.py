from redis import Redis, RedisError


class CounterStoreError(Exception):
    kind = "error"


class StoreUnavailable(CounterStoreError):
    kind = "unavailable"


class CounterMissing(CounterStoreError):
    kind = "missing"


class CounterCorrupt(CounterStoreError):
    kind = "corrupt"


def connect(config):
    return Redis(
        host=config.redis_host,
        port=config.redis_port,
        password=config.redis_password or None,
        db=config.redis_db,
    )


class CounterStore:
    """GET/SET of one integer key. Not atomic across get() and set()."""

    def __init__(self, client, key="visits"):
        self.client = client
        self.key = key

    def get(self):
        try:
            raw = self.client.get(self.key)
        except RedisError as e:
            raise StoreUnavailable(str(e)) from e
        if raw is None:
            raise CounterMissing(self.key)
        try:
            return int(raw)
        except ValueError as e:
            raise CounterCorrupt(f"{self.key}={raw!r}") from e

    def set(self, value, ttl=None):
        try:
            self.client.set(self.key, int(value), ex=ttl)
        except RedisError as e:
            raise StoreUnavailable(str(e)) from e

    def reset(self):
        self.set(0)
