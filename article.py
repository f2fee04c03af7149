# -*- coding: utf-8 -*-

import logging
import time
from collections import namedtuple

import redis

from errors import ArticleCreateError, ArticleNotFound
from log_ import log_recent
from redis_ import store_call
from vote import ONE_WEEK_IN_SECONDS, VOTE_SCORE

logger = logging.getLogger(__name__)


class Article(namedtuple('Article', 'id title link poster time votes')):
    """One stored article. `id` is the full key, e.g. 'article:1'."""

    __slots__ = ()

    @classmethod
    def from_hash(cls, key, data):
        return cls(
            id=key,
            title=data.get('title', ''),
            link=data.get('link', ''),
            poster=data.get('poster', ''),
            time=int(float(data.get('time', 0))),
            votes=int(data.get('votes', 0)),
        )


def post_article(conn, user, title, link, now=None):
    if now is None:
        now = int(time.time())
    with store_call('incr', 'article:'):
        article_id = str(conn.incr('article:'))  # 将 article: 存储的数值加1
    article = 'article:' + article_id
    voted = 'voted:' + article_id
    with store_call('sadd', voted):
        conn.sadd(voted, user)  # 自己也算一票
    with store_call('expire', voted):
        conn.expire(voted, ONE_WEEK_IN_SECONDS)

    pipe = conn.pipeline(True)
    pipe.hset(article, mapping={
        'title': title,
        'link': link,
        'poster': user,
        'time': now,
        'votes': 1,
    })
    pipe.zadd('score:', {article: now + VOTE_SCORE})
    pipe.zadd('time:', {article: now})
    log_recent(conn, 'article', '{} posted {}'.format(user, article), pipe=pipe)
    try:
        pipe.execute()
    except redis.RedisError as exc:
        # article_id and voted: are not given back
        logger.error('could not create %s for %s: %s', article, user, exc)
        raise ArticleCreateError(article_id, article, exc) from exc

    logger.debug('%s posted %s', user, article)
    return article_id


def get_article(conn, article):
    with store_call('hgetall', article):
        data = conn.hgetall(article)
    if not data:
        raise ArticleNotFound(article)
    return Article.from_hash(article, data)
