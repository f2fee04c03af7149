class StoreError(Exception):
    """A store command failed (connection, timeout or protocol error)."""

    def __init__(self, operation, key, cause=None):
        self.operation = operation
        self.key = key
        self.cause = cause
        super().__init__('{} {} failed: {}'.format(operation, key, cause))


class ArticleCreateError(StoreError):
    """The creation batch did not commit. The id was consumed anyway."""

    def __init__(self, article_id, key, cause=None):
        self.article_id = article_id
        super().__init__('exec', key, cause)


class VoteCommitError(StoreError):
    """The score/count batch did not commit after the voter was recorded."""

    def __init__(self, user, key, cause=None):
        self.user = user
        super().__init__('exec', key, cause)


class ArticleNotFound(LookupError):

    def __init__(self, article):
        self.article = article
        super().__init__('no such article: {}'.format(article))
