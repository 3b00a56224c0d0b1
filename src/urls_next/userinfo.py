import typing as _ty


class UserInfo(_ty.NamedTuple):
    username: str
    password: str | None = None

    def __str__(self) -> str:
        if not self.username:
            return ""
        if self.password is None:
            return f"{self.username}@"
        return f"{self.username}:{self.password}@"

    @classmethod
    def parse(cls, userinfo: str | None) -> "UserInfo | None":
        """Split the text before the ``@`` of an authority on its first ``:``.

        ``"bob:"`` keeps an empty password, ``"bob"`` has none at all.
        """
        if not userinfo:
            return None
        username, sep, password = userinfo.partition(":")
        return cls(username, password if sep else None)
