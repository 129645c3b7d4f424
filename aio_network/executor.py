import asyncio
import logging

from .base import ConnectivityError, InvalidResponseError, Request
from .metrics import Outcome, capture_metrics
from .response_classifier import DefaultResponseClassifier, ResponseClassifier, ResponseVerdict
from .transport import Transport
from .utils import perf_counter, perf_counter_elapsed

logger = logging.getLogger(__package__)


class RequestExecutor:
    """Performs a request through the transport and returns the body of an accepted response.

    Every call issues exactly one fetch and ends with one of: the body bytes,
    ConnectivityError when the exchange has not completed, or InvalidResponseError
    when the response status is rejected by the classifier.
    """

    __slots__ = ("__transport", "__response_classifier")

    def __init__(self, transport: Transport, *, response_classifier: ResponseClassifier | None = None):
        self.__transport = transport
        self.__response_classifier = response_classifier or DefaultResponseClassifier()

    async def perform(self, request: Request) -> bytes:
        started_at = perf_counter()
        try:
            response = await self.__transport.fetch(request)
        except asyncio.CancelledError as e:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise

            logger.warning(
                "Request %s %s has failed: cancelled by transport",
                request.method,
                request.url,
                extra={
                    "request_method": request.method,
                    "request_url": request.url,
                },
            )
            capture_metrics(request=request, outcome=Outcome.CONNECTIVITY, elapsed=perf_counter_elapsed(started_at))
            raise ConnectivityError(f"Request {request.method} {request.url} has been cancelled") from e
        except Exception as e:
            logger.warning(
                "Request %s %s has failed: network error",
                request.method,
                request.url,
                exc_info=True,
                extra={
                    "request_method": request.method,
                    "request_url": request.url,
                },
            )
            capture_metrics(request=request, outcome=Outcome.CONNECTIVITY, elapsed=perf_counter_elapsed(started_at))
            raise ConnectivityError(f"Request {request.method} {request.url} has failed") from e

        if self.__response_classifier.classify(response) == ResponseVerdict.REJECT:
            logger.warning(
                "Request %s %s has failed: unexpected status %s",
                request.method,
                request.url,
                response.status,
                extra={
                    "request_method": request.method,
                    "request_url": request.url,
                    "response_status": response.status,
                },
            )
            capture_metrics(
                request=request, outcome=Outcome.INVALID_RESPONSE, elapsed=perf_counter_elapsed(started_at)
            )
            raise InvalidResponseError(response.status)

        capture_metrics(request=request, outcome=Outcome.SUCCEEDED, elapsed=perf_counter_elapsed(started_at))
        return response.body
