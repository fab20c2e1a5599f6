from fastapi import Request

from admin_api.database import Database


def get_database(request: Request) -> Database:
    """Dependency returning the Database built at startup."""
    return request.app.state.database
