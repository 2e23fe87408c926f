"""Logging verbosity of request/response exchanges."""
from enum import Enum


class DebugLevel(str, Enum):
    """How much of each request/response exchange gets logged."""

    NONE = "NONE"
    REQUEST_MIN = "REQUEST_MIN"
    REQUEST_MAX = "REQUEST_MAX"
    ANSWER_MIN = "ANSWER_MIN"
    ANSWER_MAX = "ANSWER_MAX"
    MIN = "MIN"
    MAX = "MAX"

    @property
    def logs_request(self) -> bool:
        return self in (
            DebugLevel.REQUEST_MIN,
            DebugLevel.REQUEST_MAX,
            DebugLevel.MIN,
            DebugLevel.MAX,
        )

    @property
    def logs_request_body(self) -> bool:
        return self in (DebugLevel.REQUEST_MAX, DebugLevel.MAX)

    @property
    def logs_answer(self) -> bool:
        return self in (
            DebugLevel.ANSWER_MIN,
            DebugLevel.ANSWER_MAX,
            DebugLevel.MIN,
            DebugLevel.MAX,
        )

    @property
    def logs_answer_body(self) -> bool:
        return self in (DebugLevel.ANSWER_MAX, DebugLevel.MAX)
