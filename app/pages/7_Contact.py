"""Contact page: enquiry form with required-field validation."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import streamlit as st

from medfin.forms.contact import ContactForm, validate_contact_form

st.set_page_config(page_title="Contact - MedFin", page_icon="✉️", layout="wide")

st.title("✉️ Contact Us")
st.caption("Questions about the figures? Get in touch with the finance team.")

col_form, col_info = st.columns([2, 1])

with col_form:
    with st.form("contact_form", clear_on_submit=False):
        name = st.text_input("Name")
        email = st.text_input("Email")
        subject = st.text_input("Subject")
        message = st.text_area("Message", height=150)
        submitted = st.form_submit_button("Send Message")

    if submitted:
        form = ContactForm(name=name, email=email, subject=subject, message=message)
        errors = validate_contact_form(form)
        if errors:
            for error in errors.values():
                st.error(error)
        else:
            st.success("Thank you! Your message has been received.")

with col_info:
    st.markdown("""
#### Contact Information

📧 finance@hospital.example

📞 +91 11 2345 6789

📍 Hospital Administration Block, New Delhi
""")
