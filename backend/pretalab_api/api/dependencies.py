"""Route Dependencies — resolve collaborators from the app's container."""

from fastapi import Request

from pretalab_api.infrastructure.container import AppContainer


def get_container(request: Request) -> AppContainer:
    return request.app.state.container
