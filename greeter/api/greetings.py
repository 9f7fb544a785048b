# greeter/api/greetings.py

import logging
from typing import Optional

from fastapi import APIRouter, Header, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from greeter.models.greetings import GreetingRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["greetings"], default_response_class=PlainTextResponse)


def hello(username: str) -> str:
    return f"Hello {username}!\n"


def bad_request(message: str) -> PlainTextResponse:
    return PlainTextResponse(f"{message}\n", status_code=400)


@router.get("/")
def home() -> str:
    return "Welcome to our HomePage!\n"


@router.get("/goodbye")
def goodbye() -> str:
    return "Goodbye world is served at goodbye\n"


@router.get("/hello/")
def hello_query(request: Request) -> str:
    """
    Greets the first `user` query parameter, or "User" when it is absent.
    """
    users = request.query_params.getlist("user")
    return hello(users[0] if users else "User")


@router.get("/responses/{user}/hello/")
def hello_path(user: str) -> str:
    return hello(user)


@router.get("/user/hello")
def hello_header(user: Optional[str] = Header(default=None)):
    """
    Greets the name sent in the `user` request header.
    """
    if not user:
        return bad_request("invalid username provided")

    return hello(user)


@router.post("/json")
async def hello_json(request: Request):
    """
    Greets the `Name` field of a JSON object body.
    """
    body = await request.body()

    if len(body) == 0:
        return bad_request("empty request body")

    try:
        payload = GreetingRequest.model_validate_json(body)
    except ValidationError as e:
        logger.info("Rejected /json body: %s", e.errors(include_url=False))
        return bad_request("invalid request body!")

    if payload.name == "":
        return bad_request("invalid request body!")

    return PlainTextResponse(hello(payload.name))
