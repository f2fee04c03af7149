# -*- coding: utf-8 -*-

from ranking import get_articles
from redis_ import store_call

GROUP_CACHE_SECONDS = 60

"""
 group:programming   set

 article:92617
 article:83729

 ***********

 score:programming   zset   (expires after 60s)

 article:92617    1332065907

"""


def add_remove_groups(conn, article_id, to_add=(), to_remove=()):
    article = 'article:' + str(article_id)
    if not all(to_add) or not all(to_remove):
        raise ValueError('group name must not be empty')
    for group in to_add:
        with store_call('sadd', 'group:' + group):
            conn.sadd('group:' + group, article)
    for group in to_remove:
        with store_call('srem', 'group:' + group):
            conn.srem('group:' + group, article)  # 在对应的集合中删除某些值


def add_groups(conn, article_id, groups):
    add_remove_groups(conn, article_id, to_add=groups)


def remove_groups(conn, article_id, groups):
    add_remove_groups(conn, article_id, to_remove=groups)


def group_ranking(conn, group, order='score:'):
    if not group:
        raise ValueError('group name must not be empty')
    key = order + group   # 为每个群组的每种排序创建一个键
    with store_call('exists', key):
        cached = conn.exists(key)
    if not cached:
        # weight 0 on the group set so members keep the ranking's score
        pipe = conn.pipeline(True)
        pipe.zinterstore(key, {'group:' + group: 0, order: 1})
        pipe.expire(key, GROUP_CACHE_SECONDS)
        with store_call('exec', key):
            pipe.execute()  # the view is never written without its ttl
    return key


def get_group_articles(conn, group, page, order='score:'):
    return get_articles(conn, page, group_ranking(conn, group, order))
