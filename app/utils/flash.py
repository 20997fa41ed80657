"""One-shot messages kept in the session until the next rendered page."""
from typing import Dict, List
from fastapi import Request

FLASH_SESSION_KEY = "_flash_messages"


def flash(request: Request, message: str, category: str = "info") -> None:
    messages = request.session.get(FLASH_SESSION_KEY, [])
    messages.append({"category": category, "message": message})
    request.session[FLASH_SESSION_KEY] = messages


def get_flashed_messages(request: Request) -> List[Dict[str, str]]:
    """Return and clear pending messages"""
    return request.session.pop(FLASH_SESSION_KEY, [])
