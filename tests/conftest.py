import pytest
from redis import ConnectionError as RedisConnectionError

from visits.app import create_app
from visits.store import CounterStore


class DictRedis:
    """Just enough of redis.Redis for the counter: bytes out, str/int in."""

    def __init__(self):
        self.data = {}
        self.expiry = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value, ex=None):
        self.data[key] = str(value).encode()
        self.expiry[key] = ex
        return True


class DownRedis:
    def get(self, key):
        raise RedisConnectionError("Error 111 connecting to redis-go:6379. Connection refused.")

    def set(self, key, value, ex=None):
        raise RedisConnectionError("Error 111 connecting to redis-go:6379. Connection refused.")


@pytest.fixture
def redis_client():
    return DictRedis()


@pytest.fixture
def down_redis():
    return DownRedis()


@pytest.fixture
def store(redis_client):
    s = CounterStore(redis_client)
    s.reset()
    return s


@pytest.fixture
def client(store):
    return create_app(store).test_client()


@pytest.fixture
def down_client(down_redis):
    return create_app(CounterStore(down_redis)).test_client()
