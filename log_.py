# coding=utf-8

import logging
import os
import time

SEVERITY = {
    logging.DEBUG: 'debug',
    logging.INFO: 'info',
    logging.WARNING: 'warning',
    logging.ERROR: 'error',
    logging.CRITICAL: 'critical',
}

SEVERITY.update([(name, name) for name in SEVERITY.values()])
RECENT_SIZE = 100

"""
 recent:vote:info   list

 Sun Oct 18 10:00:00 2026 user1 voted on article:1
 Sun Oct 18 09:59:58 2026 sky posted article:1

"""


def configure_logging(level=None):
    level = level or os.environ.get('LOG_LEVEL', 'INFO')
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def recent_key(name, severity=logging.INFO):
    severity = str(SEVERITY.get(severity, severity)).lower()
    return "recent:{}:{}".format(name, severity)


def log_recent(conn, name, message, severity=logging.INFO, pipe=None):
    # with a caller's pipe the entry is only queued and commits with that batch
    destination = recent_key(name, severity)
    message = time.asctime() + ' ' + message
    own = pipe is None
    if own:
        pipe = conn.pipeline()
    pipe.lpush(destination, message)
    pipe.ltrim(destination, 0, RECENT_SIZE - 1)  # 只保留最近的100条
    if own:
        pipe.execute()


def get_recent(conn, name, severity=logging.INFO, count=RECENT_SIZE):
    return conn.lrange(recent_key(name, severity), 0, count - 1)
