# catalog_app/main.py

import streamlit as st
from streamlit_cookies_manager import EncryptedCookieManager

from catalog_app.config import API_URL, COOKIE_PASSWORD, COOKIE_PREFIX
from catalog_app.services.api import MovieApi
from catalog_app.store import AuthStore, MovieStore
from catalog_app.ui.login import login_page
from catalog_app.ui.movies import movie_detail_page, movie_list_page
from catalog_app.ui.movie_form import add_movie_page, edit_movie_page


st.set_page_config(page_title="Movies", layout="wide")

cookies = EncryptedCookieManager(prefix=COOKIE_PREFIX, password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def build_stores():
    """
    Wires the API client and both stores over this browser session's state.
    The API reads the token through the auth store on every request.
    """
    holder = {}
    api = MovieApi(API_URL, token_getter=lambda: holder["auth"].token)
    auth = AuthStore(st.session_state, api, storage=cookies)
    holder["auth"] = auth
    auth.restore()
    return auth, MovieStore(st.session_state, api), api


def navigate(page, **params):
    st.session_state["page"] = page
    st.session_state["page_params"] = params
    st.rerun()


def main():
    auth, movies, api = build_stores()

    if not auth.is_authenticated:
        login_page(auth)
        return

    page = st.session_state.get("page", "list")
    params = st.session_state.get("page_params", {})

    if page == "add":
        add_movie_page(movies, navigate)
    elif page == "edit":
        edit_movie_page(movies, api, params.get("movie_id"), navigate)
    elif page == "detail":
        movie_detail_page(movies, api, params.get("movie_id"), navigate)
    else:
        movie_list_page(auth, movies, api, navigate)


main()
