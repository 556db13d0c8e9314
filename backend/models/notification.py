"""Transient notifications shown to admins after an action."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class Notification(BaseModel):
    """A toast: short title, one-line description, and whether it reports a failure."""

    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"
