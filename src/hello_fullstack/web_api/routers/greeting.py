"""
Greeting Router
===============
The root endpoint. Answers every GET (and HEAD) with the same text.
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

GREETING = "Hello From Express"


@router.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def greet() -> str:
    """
    Root endpoint.
    Returns the greeting as plain text, regardless of headers or body.
    """
    return GREETING
