"""
Demo accounts.

Credentials are matched as stored, there is no hashing and no session
store. The manager token is base64-encoded JSON of the manager's id and
username, checked against the database on every request.
"""
import base64
import binascii
import json
import logging
import uuid
from typing import Any, Dict
from app.core.errors import NotAuthenticatedError
from app.models.account import Employee, Manager

log = logging.getLogger("account_service")


async def login_employee(data: Dict[str, Any]) -> Employee:
    """Returns the employee with this username, registering them on first login."""
    employee = await Employee.get_or_none(username=data["username"])
    if not employee:
        employee = await Employee.create(**data)
        log.info(f"Registered employee {employee.username} ({employee.company}).")
    return employee


async def authenticate_manager(username: str, password: str) -> Manager:
    manager = await Manager.get_or_none(username=username)
    if not manager or manager.password != password or not manager.is_active:
        log.warning(f"Rejected manager login for {username!r}.")
        raise NotAuthenticatedError("Invalid credentials")
    return manager


def issue_token(manager: Manager) -> str:
    payload = json.dumps({"id": str(manager.id), "username": manager.username})
    return base64.b64encode(payload.encode()).decode()


def decode_token(token: str) -> Dict[str, Any]:
    try:
        data = json.loads(base64.b64decode(token, validate=True).decode())
    except (binascii.Error, UnicodeDecodeError, ValueError):
        raise NotAuthenticatedError("Invalid authentication token")
    if not isinstance(data, dict) or "id" not in data or "username" not in data:
        raise NotAuthenticatedError("Invalid authentication token")
    return data


async def manager_from_token(token: str) -> Manager:
    data = decode_token(token)
    try:
        manager_id = uuid.UUID(str(data["id"]))
    except ValueError:
        raise NotAuthenticatedError("Invalid authentication token")

    manager = await Manager.get_or_none(id=manager_id)
    if not manager or not manager.is_active:
        raise NotAuthenticatedError("Invalid or inactive manager")
    if manager.username != data["username"]:
        raise NotAuthenticatedError("Invalid manager credentials")
    return manager
