import os
from contextlib import contextmanager

import redis

from errors import StoreError

DEFAULT_REDIS_URL = 'redis://127.0.0.1:6379/0'


def get_redis(url=None):
    url = url or os.environ.get('REDIS_URL', DEFAULT_REDIS_URL)
    pool = redis.ConnectionPool.from_url(url, decode_responses=True)
    return redis.Redis(connection_pool=pool)


@contextmanager
def store_call(operation, key):
    """Re-raise any redis failure inside the block as a StoreError naming the command and key."""
    try:
        yield
    except redis.RedisError as exc:
        raise StoreError(operation, key, exc) from exc
