# catalog_app/ui/login.py

import streamlit as st

from catalog_app.services.api import ApiError
from catalog_app.store import AuthStore


def login_page(auth: AuthStore):
    st.title("Sign in")

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form(auth)
    else:
        show_login_form(auth)


def show_login_form(auth: AuthStore):
    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if submitted:
        with st.spinner("Signing in..."):
            try:
                auth.login(email, password)
            except ApiError as e:
                st.error(f"Login failed: {e.message or 'Invalid credentials'}")
            else:
                st.session_state["page"] = "list"
                st.rerun()

    if st.button("Create an account"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form(auth: AuthStore):
    st.subheader("Register")

    with st.form("register_form"):
        username = st.text_input("Username")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        first_name = st.text_input("First name (optional)")
        last_name = st.text_input("Last name (optional)")
        submitted = st.form_submit_button("Register")

    if submitted:
        with st.spinner("Creating account..."):
            try:
                auth.register(username, email, password, first_name or None, last_name or None)
            except ApiError as e:
                st.error(f"Registration failed: {e.message or 'Server error'}")
            else:
                st.session_state["show_register"] = False
                st.session_state["page"] = "list"
                st.rerun()

    if st.button("Back to login"):
        st.session_state["show_register"] = False
        st.rerun()
