from .base import Request, Response
from .transport import Transport


class RecordingTransport(Transport):
    """Fake transport which records requests and answers each of them with the same outcome"""

    __slots__ = ("requests", "_outcome")

    def __init__(self, outcome: Response | BaseException | None = None) -> None:
        self.requests: list[Request] = []
        self._outcome = outcome if outcome is not None else Response(status=200)

    async def fetch(self, request: Request) -> Response:
        self.requests.append(request)
        if isinstance(self._outcome, BaseException):
            raise self._outcome.with_traceback(None)
        return self._outcome
