"""User service response DTOs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenInfoServiceResponse:
    access_token: str
    refresh_token: str
    grant_type: str


@dataclass(frozen=True)
class AvailableTofinIdServiceResponse:
    tofin_id: str
    available: bool
    reason: str


@dataclass(frozen=True)
class AvailableContactServiceResponse:
    contact: str
    available: bool
    reason: str
