# -*- coding: utf-8 -*-

import enum
import logging
import time

import redis

from errors import VoteCommitError
from log_ import log_recent
from redis_ import store_call

ONE_WEEK_IN_SECONDS = 7 * 86400
VOTE_SCORE = 432
VOTE_WINDOW_SECONDS = 0  # 0: only articles whose time is not yet in the past accept votes

logger = logging.getLogger(__name__)

"""
 article:100408   hash

 title
 link
 votes
 time
 poster

 ***********

 time:  zset

 article:100408   1332065475

***************

 score:   zset

 article:100408    1332065907

****************

 voted:100408   set

 user:234487
 user:132097

"""


class VoteResult(enum.Enum):
    APPLIED = None
    UNKNOWN_ARTICLE = 'unknown-article'
    WINDOW_CLOSED = 'window-closed'
    DUPLICATE_VOTE = 'duplicate-vote'

    @property
    def applied(self):
        return self is VoteResult.APPLIED

    @property
    def reason(self):
        return self.value


def article_vote(conn, user, article, now=None):
    if now is None:
        now = int(time.time())
    cutoff = now - VOTE_WINDOW_SECONDS
    with store_call('zscore', 'time:'):
        posted = conn.zscore('time:', article)
    if posted is None:
        logger.info('%s cannot vote on %s: no such article', user, article)
        return VoteResult.UNKNOWN_ARTICLE
    if posted < cutoff:
        logger.info('%s cannot vote on %s: voting closed', user, article)
        return VoteResult.WINDOW_CLOSED

    article_id = article.partition(':')[-1]
    voted = 'voted:' + article_id
    with store_call('sadd', voted):
        added = conn.sadd(voted, user)  # 返回1表示该用户不存在于该集合
    if not added:
        logger.info('%s cannot vote on %s: duplicate vote', user, article)
        return VoteResult.DUPLICATE_VOTE

    # the voter stays recorded in voted: even if this batch fails
    pipe = conn.pipeline(True)
    pipe.zincrby('score:', VOTE_SCORE, article)
    pipe.hincrby(article, 'votes', 1)
    log_recent(conn, 'vote', '{} voted on {}'.format(user, article), pipe=pipe)
    try:
        pipe.execute()
    except redis.RedisError as exc:
        logger.error('vote by %s on %s was recorded but not counted: %s', user, article, exc)
        raise VoteCommitError(user, article, exc) from exc
    return VoteResult.APPLIED
