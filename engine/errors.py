# engine/errors.py

class CorrelationError(Exception):
    pass


class InvalidParameters(CorrelationError):
    pass


class MalformedEvent(CorrelationError):
    pass
