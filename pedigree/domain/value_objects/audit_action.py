from __future__ import annotations

from enum import Enum


class AuditAction(str, Enum):
    CREATE = "CREATE"
    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"
    EXPORT = "EXPORT"
    IMPORT = "IMPORT"
    TRANSFER_OWNERSHIP = "TRANSFER_OWNERSHIP"
    APPROVE = "APPROVE"
    REJECT = "REJECT"
