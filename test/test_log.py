import logging
import unittest

import fakeredis

from article import post_article
from log_ import get_recent, log_recent, recent_key
from vote import article_vote

NOW = 1500000000


class TestLog(unittest.TestCase):
    def setUp(self):
        self.conn = fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)

    def tearDown(self):
        self.conn.flushdb()
        del self.conn

    def test_recent_key(self):
        self.assertEqual(recent_key('vote'), 'recent:vote:info')
        self.assertEqual(recent_key('vote', logging.ERROR), 'recent:vote:error')
        self.assertEqual(recent_key('vote', 'WARNING'), 'recent:vote:warning')

    def test_log_recent_is_capped(self):
        for i in range(120):
            log_recent(self.conn, 'test', 'message {}'.format(i))

        recent = get_recent(self.conn, 'test')
        self.assertEqual(len(recent), 100)
        self.assertTrue(recent[0].endswith(' message 119'))

    def test_queued_on_callers_pipe(self):
        pipe = self.conn.pipeline(True)
        log_recent(self.conn, 'test', 'queued', pipe=pipe)
        self.assertEqual(get_recent(self.conn, 'test'), [])

        pipe.execute()
        self.assertEqual(len(get_recent(self.conn, 'test')), 1)

    def test_activity_is_recorded(self):
        article = 'article:' + post_article(self.conn, 'sky', 'This is sky', 'sky.com', now=NOW)
        article_vote(self.conn, 'user1', article, now=NOW)
        article_vote(self.conn, 'user1', article, now=NOW)

        self.assertTrue(get_recent(self.conn, 'article')[0].endswith('sky posted article:1'))
        votes = get_recent(self.conn, 'vote')
        self.assertEqual(len(votes), 1)
        self.assertTrue(votes[0].endswith('user1 voted on article:1'))
