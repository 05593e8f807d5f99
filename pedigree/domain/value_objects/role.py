from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    ADMIN = "ADMIN"
    OWNER = "OWNER"
    HANDLER = "HANDLER"
    CLUB = "CLUB"
    VIEWER = "VIEWER"

    def can_create(self) -> bool:
        return self is not Role.VIEWER

    def can_update(self) -> bool:
        return self is not Role.VIEWER

    def can_delete(self) -> bool:
        return self is Role.ADMIN

    def can_review(self) -> bool:
        return self is Role.ADMIN

    def can_manage_users(self) -> bool:
        return self is Role.ADMIN
