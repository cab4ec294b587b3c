"""User table layout and the sample rows shown by the user management view."""

from __future__ import annotations

from dataclasses import dataclass

_COLUMNS = ("", "ID", "用户名", "真实姓名", "角色", "账号状态", "操作")

DEFAULT_ROLE = "角色"
DEFAULT_STATUS = "正常"


@dataclass
class User:
    """One row of the user table."""

    id: int
    username: str
    real_name: str
    role: str = DEFAULT_ROLE
    status: str = DEFAULT_STATUS
    checked: bool = False

    def row(self) -> list[str]:
        """Cell texts of the row, in column order; the action column stays empty."""
        return ["", str(self.id), self.username, self.real_name, self.role, self.status, ""]


def user_columns() -> list[str]:
    """Header labels of the user table; the first is the check box column."""
    return list(_COLUMNS)


def sample_users(count: int = 10) -> list[User]:
    """Placeholder users numbered from 1, as listed before real data is loaded."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [
        User(id=number, username=f"user{number}", real_name=f"真实姓名{number}")
        for number in range(1, count + 1)
    ]