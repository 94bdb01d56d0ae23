"""Contact form validation.

Only required-field and email-format checks; messages are not sent
anywhere.
"""

import re
from dataclasses import dataclass, fields
from typing import Dict

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class ContactForm:
    """Values entered on the Contact page."""

    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


def validate_contact_form(form: ContactForm) -> Dict[str, str]:
    """Check a contact form submission.

    Args:
        form: The submitted values.

    Returns:
        Mapping of field name -> error message. Empty when the form is valid.
    """
    errors = {}
    for f in fields(form):
        value = getattr(form, f.name) or ""
        if not value.strip():
            errors[f.name] = f"{f.name.capitalize()} is required"

    if "email" not in errors and not EMAIL_PATTERN.match(form.email):
        errors["email"] = "Invalid email format"

    return errors
