import abc
import enum

from .base import Response


class ResponseVerdict(enum.Enum):
    ACCEPT = enum.auto()
    REJECT = enum.auto()


class ResponseClassifier(abc.ABC):
    __slots__ = ()

    @abc.abstractmethod
    def classify(self, response: Response) -> ResponseVerdict: ...


class DefaultResponseClassifier(ResponseClassifier):
    """Accepts statuses from the closed interval [min_status, max_status]"""

    __slots__ = ("__min_status", "__max_status")

    def __init__(self, min_status: int = 200, max_status: int = 299):
        if min_status > max_status:
            raise ValueError("min_status should not be greater than max_status")

        self.__min_status = min_status
        self.__max_status = max_status

    def classify(self, response: Response) -> ResponseVerdict:
        if self.__min_status <= response.status <= self.__max_status:
            return ResponseVerdict.ACCEPT
        return ResponseVerdict.REJECT
