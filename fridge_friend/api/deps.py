from fastapi import Request

from fridge_friend.rate_limit import InMemoryRateLimiter


UNKNOWN_CLIENT = "unknown"


def client_identifier(request: Request) -> str:
    return (
        request.headers.get("x-forwarded-for")
        or request.headers.get("x-real-ip")
        or UNKNOWN_CLIENT
    )


def get_rate_limiter(request: Request) -> InMemoryRateLimiter:
    return request.app.state.rate_limiter
