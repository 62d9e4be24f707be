"""
CardFolio — Shared route dependencies
"""
from fastapi import Request

from cardfolio.core.notifier import Notifier


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier
