class ResolventError(Exception):
    pass


class MalformedSentence(ResolventError, ValueError):
    def __init__(self, sentence, reason):
        super().__init__(f"Malformed sentence {sentence!r}: {reason}")
        self.sentence = sentence
        self.reason = reason


class SearchLimitExceeded(ResolventError):
    def __init__(self, limit, proof=None):
        super().__init__(f"No decision after {limit} derived clauses")
        self.limit = limit
        self.proof = proof
