"""
Form models shared by the test modules.
"""
from __future__ import annotations

from typing import Optional

from formview.model import FormModel
from formview.validation import (
    Email,
    HasLength,
    HasLengthHtmlOptions,
    InRange,
    MatchRegularExpression,
    Number,
    Required,
    RequiredHtmlOptions,
)


PASSWORD_MESSAGE = (
    "Must contain at least one number and one uppercase and lowercase letter, "
    "and at least 8 or more characters."
)


class LoginForm(FormModel):
    login: Optional[str] = None
    password: Optional[str] = None
    remember_me: bool = False

    def attribute_labels(self) -> dict[str, str]:
        return {
            "login": "Login:",
            "password": "Password:",
            "remember_me": "remember Me:",
        }

    def attribute_hints(self) -> dict[str, str]:
        return {
            "login": "Write your id or email.",
            "password": "Write your password.",
        }

    def rules(self) -> dict[str, list]:
        return {
            "login": [Required(), HasLength(min=4, max=40), Email()],
            "password": [Required(), HasLength(min=8)],
        }


class PersonalForm(FormModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    city: Optional[str] = None
    roles: list[str] = []
    age: Optional[int] = None
    bio: Optional[str] = None
    terms: bool = False

    def attribute_hints(self) -> dict[str, str]:
        return {"name": "Write your first name."}

    def rules(self) -> dict[str, list]:
        return {
            "name": [Required(), HasLength(min=4, max=50)],
            "email": [Email()],
            "password": [
                RequiredHtmlOptions(Required(), aria_attribute=True),
                MatchRegularExpression(r"^(?=.*[0-9])(?=.*[a-z])(?=.*[A-Z]).{8,}$", message=PASSWORD_MESSAGE),
            ],
            "city": [InRange(("berlin", "paris"))],
            "age": [Number(as_integer=True, min=0, max=130)],
            "bio": [HasLengthHtmlOptions(HasLength(max=200))],
        }


class StubForm(FormModel):
    field_string: str = ""
    fieldString: Optional[str] = None


class FlatForm(FormModel):
    query: Optional[str] = None
    page: int = 1

    def form_name(self) -> str:
        return ""


class AddressForm(FormModel):
    city: Optional[str] = None
    zip: Optional[str] = None

    def attribute_labels(self) -> dict[str, str]:
        return {"city": "Town"}

    def rules(self) -> dict[str, list]:
        return {"city": [Required()]}


class ProfileForm(FormModel):
    name: Optional[str] = None
    address: Optional[AddressForm] = None
    tags: list[str] = []


class FlagForm(FormModel):
    active: bool = True
    off: bool = False
