# greeter/api/deps.py

from fastapi import Request

from greeter.registry.users import UserRegistry


def get_registry(request: Request) -> UserRegistry:
    return request.app.state.registry
