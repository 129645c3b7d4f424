import abc

from .base import Request, Response


class Transport(abc.ABC):
    """Performs the network exchange for a single request.

    A status outside of the successful range is still a response and must be returned;
    only an exchange that could not complete (unresolvable host, refused or reset connection,
    timeout, cancellation) is raised.
    """

    __slots__ = ()

    @abc.abstractmethod
    async def fetch(self, request: Request) -> Response: ...
