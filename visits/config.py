import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    redis_host: str = "redis-go"
    redis_port: int = 6379
    redis_password: str = ""
    redis_db: int = 0
    counter_key: str = "visits"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        return cls(
            redis_host=env.get("REDIS_HOST", cls.redis_host),
            redis_port=int(env.get("REDIS_PORT", cls.redis_port)),
            redis_password=env.get("REDIS_PASSWORD", cls.redis_password),
            redis_db=int(env.get("REDIS_DB", cls.redis_db)),
            counter_key=env.get("COUNTER_KEY", cls.counter_key),
            host=env.get("HOST", cls.host),
            port=int(env.get("PORT", cls.port)),
            log_level=env.get("LOG_LEVEL", cls.log_level).upper(),
        )
