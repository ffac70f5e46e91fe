"""FastAPI dependencies that hand routes the per-app service container."""

from __future__ import annotations

from fastapi import Request

from retailops.infrastructure.bootstrap import Container


def get_container(request: Request) -> Container:
    return request.app.state.container
