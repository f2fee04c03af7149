from article import Article
from redis_ import store_call

ARTICLES_PER_PAGE = 25


def get_articles(conn, page, order='score:'):
    """Return one page of `order` as Article records, lowest score first.

    Pages start at 1. Members whose hash is gone are skipped, and a page past
    the end of the ranking is simply empty.
    """
    if page < 1:
        raise ValueError('page must be >= 1, got {}'.format(page))
    start = (page - 1) * ARTICLES_PER_PAGE
    end = page * ARTICLES_PER_PAGE - 1

    with store_call('zrange', order):
        ids = conn.zrange(order, start, end)
    if not ids:
        return []

    pipe = conn.pipeline(False)
    for id in ids:
        pipe.hgetall(id)
    with store_call('hgetall', order):
        hashes = pipe.execute()
    return [Article.from_hash(id, data) for id, data in zip(ids, hashes) if data]
