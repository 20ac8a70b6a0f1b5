"""
FastAPI dependencies shared by the REST routers
"""
from fastapi import Request

from app.container import Container


def get_container(request: Request) -> Container:
    """Container built by the application factory for this app instance"""
    return request.app.state.container
