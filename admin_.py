# coding=utf-8
"""Inspection and reset helpers for operators. The voting core never calls these."""

import logging

from log_ import configure_logging
from redis_ import get_redis, store_call

logger = logging.getLogger(__name__)

RANKINGS = ('score:', 'time:')


def scan_keys(conn, match='*', count=10):
    with store_call('scan', match):
        return list(conn.scan_iter(match=match, count=count))


def classify_keys(keys):
    kinds = {
        'articles': [], 'voted': [], 'score': [], 'time': [],
        'groups': [], 'views': [], 'recent': [], 'other': [],
    }
    for key in sorted(keys):
        if key.startswith('article:') and key != 'article:':
            kinds['articles'].append(key)
        elif key.startswith('voted:'):
            kinds['voted'].append(key)
        elif key in RANKINGS:
            kinds[key.rstrip(':')].append(key)
        elif key.startswith(RANKINGS):
            kinds['views'].append(key)  # score:<group> / time:<group>
        elif key.startswith('group:'):
            kinds['groups'].append(key)
        elif key.startswith('recent:'):
            kinds['recent'].append(key)
        else:
            kinds['other'].append(key)
    return kinds


def dump_db(conn):
    kinds = classify_keys(scan_keys(conn))
    dump = {'articles': {}, 'score': {}, 'time': {}, 'voted': {}}

    logger.info('===== article =====')
    for key in kinds['articles']:
        with store_call('hgetall', key):
            dump['articles'][key] = data = conn.hgetall(key)
        for k, v in data.items():
            logger.info('[key:%s] %s:%s', key, k, v)

    for kind in ('score', 'time'):
        logger.info('===== %s =====', kind)
        for key in kinds[kind]:
            with store_call('zrange', key):
                dump[kind][key] = res = conn.zrange(key, 0, -1, withscores=True)
            for member, score in res:
                logger.info('[key:%s] %s %f', key, member, score)

    logger.info('===== voted =====')
    for key in kinds['voted']:
        with store_call('smembers', key):
            dump['voted'][key] = members = conn.smembers(key)
        for member in sorted(members):
            logger.info('[key:%s] %s', key, member)
    return dump


def clear_db(conn):
    with store_call('flushdb', '*'):
        conn.flushdb()


def find_drift(conn):
    """Report what failed creation or vote batches left behind. Changes nothing.

    orphan_ids: ids handed out by the article: counter that never got a hash.
    vote_drift: article -> (voters still in voted:, votes field) where they
    differ. Expired voted: sets are not reported.
    """
    with store_call('get', 'article:'):
        last = int(conn.get('article:') or 0)

    pipe = conn.pipeline(False)
    for article_id in range(1, last + 1):
        pipe.exists('article:{}'.format(article_id))
        pipe.exists('voted:{}'.format(article_id))
        pipe.scard('voted:{}'.format(article_id))
        pipe.hget('article:{}'.format(article_id), 'votes')
    with store_call('exists', 'article:*'):
        replies = pipe.execute() if last else []

    orphan_ids = []
    vote_drift = {}
    for i in range(last):
        exists, has_voters, voters, votes = replies[i * 4:i * 4 + 4]
        article_id = str(i + 1)
        if not exists:
            orphan_ids.append(article_id)
        elif has_voters and int(votes or 0) != voters:
            vote_drift['article:' + article_id] = (voters, int(votes or 0))
    if orphan_ids or vote_drift:
        logger.warning('drift: %d orphan ids, %d articles with uncounted votes',
                       len(orphan_ids), len(vote_drift))
    return {'orphan_ids': orphan_ids, 'vote_drift': vote_drift}


if __name__ == '__main__':
    configure_logging()
    dump_db(get_redis())
