"""User profile with email checks and an in-memory existence flag."""

from __future__ import annotations

import re
from typing import Final
from weakref import WeakKeyDictionary

from .enums import OtherBool
from .errors import ValidationError

# Pattern from emailregex.com. Good enough for nearly every real address;
# no pattern validates email perfectly.
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r'(?:[^<>()\[\]\\.,;:\s@"]+(?:\.[^<>()\[\]\\.,;:\s@"]+)*|".+")'
    r"@"
    r"(?:\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\]|(?:[a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,})"
)

# Passwords live here rather than on the instance, so nothing reachable from
# a User exposes them.
_PASSWORDS: WeakKeyDictionary[User, str] = WeakKeyDictionary()


def parse_other_bool(value: OtherBool | str) -> OtherBool:
    """Coerce ``value`` into an :class:`OtherBool`.

    Raises:
        ValidationError: When ``value`` is neither ``"yes"`` nor ``"no"``.

    Example:
        >>> parse_other_bool("no")
        <OtherBool.NO: 'no'>
    """
    try:
        return OtherBool(value)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid value {value!r}: expected 'yes' or 'no'",
            expected=(OtherBool.YES.value, OtherBool.NO.value),
            actual=value,
        ) from exc


class User:
    """A user the site can personalise its pages for.

    ``display_name`` may be reassigned freely. ``email``, ``admin`` and
    ``signed_out`` are fixed at construction. ``exists`` changes only
    through :meth:`toggle_exists_status`. The password is kept out of
    reach of every public attribute and of ``repr``.

    Args:
        display_name: Name shown to the user.
        email: The user's email address.
        password: The user's password.
        exists: Whether the user exists in the user store. Defaults to True.
        admin: Whether the user is an administrator. Defaults to False.
        signed_out: Whether the user signed out. Defaults to False.

    Example:
        >>> user = User("Someone", "someone@gmail.com", "test1234")
        >>> user.validate_email()
        True
        >>> user.get_email_domain(name=True)
        ['someone', 'gmail.com']
        >>> user.toggle_exists_status("no")
        False
        >>> user
        User(display_name='Someone', email='someone@gmail.com', exists=False, admin=False, signed_out=False)
    """

    __slots__ = ("__weakref__", "_admin", "_email", "_exists", "_signed_out", "display_name")

    def __init__(
        self,
        display_name: str,
        email: str,
        password: str,
        exists: bool = True,
        admin: bool = False,
        signed_out: bool = False,
    ) -> None:
        self.display_name = display_name
        self._email = email
        self._exists = exists
        self._admin = admin
        self._signed_out = signed_out
        _PASSWORDS[self] = password

    @property
    def email(self) -> str:
        return self._email

    @property
    def exists(self) -> bool:
        return self._exists

    @property
    def admin(self) -> bool:
        return self._admin

    @property
    def signed_out(self) -> bool:
        return self._signed_out

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(display_name={self.display_name!r}, email={self._email!r}, "
            f"exists={self._exists!r}, admin={self._admin!r}, signed_out={self._signed_out!r})"
        )

    def validate_email(self) -> bool:
        """Check the email against :data:`EMAIL_PATTERN`.

        The same address always gives the same answer.

        Example:
            >>> User("Someone", "someone@gmail.c", "test1234").validate_email()
            False
            >>> User("SomeoneElse", "someoneelse@gmail.com", "test12345").validate_email()
            True
        """
        return EMAIL_PATTERN.fullmatch(self._email) is not None

    def get_email_domain(self, name: bool = False) -> list[str]:
        """Split the email at its last ``@``.

        Args:
            name: Also return the local part, ahead of the domain.

        Returns:
            ``[domain]``, or ``[local_part, domain]`` when ``name`` is true.

        Raises:
            ValidationError: When the email has no ``@``.
        """
        local_part, separator, domain = self._email.rpartition("@")
        if not separator:
            raise ValidationError(
                f"Invalid email {self._email!r}: expected an '@' between name and domain",
                expected="local-part@domain",
                actual=self._email,
            )
        return [local_part, domain] if name else [domain]

    def toggle_exists_status(self, value: OtherBool | str) -> bool:
        """Set ``exists`` from a *yes*/*no* answer.

        Leaves the flag alone when it already holds the requested value.

        Args:
            value: ``"yes"`` for True or ``"no"`` for False.

        Returns:
            The value of ``exists`` after the call.

        Raises:
            ValidationError: When ``value`` is neither ``"yes"`` nor ``"no"``.
                ``exists`` is untouched.
        """
        wanted = parse_other_bool(value).as_bool()
        if wanted != self._exists:
            self._exists = wanted
        return self._exists


__all__ = [
    "EMAIL_PATTERN",
    "User",
    "parse_other_bool",
]
