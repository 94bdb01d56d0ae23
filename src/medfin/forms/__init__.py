"""User input validation for the app pages."""

from medfin.forms.contact import ContactForm, validate_contact_form

__all__ = ["ContactForm", "validate_contact_form"]
