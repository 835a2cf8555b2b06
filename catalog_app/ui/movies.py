# catalog_app/ui/movies.py

import streamlit as st

from catalog_app.services.api import ApiError, MovieApi
from catalog_app.store import AuthStore, MovieStore


COLUMNS = 4


def movie_list_page(auth: AuthStore, movies: MovieStore, api: MovieApi, navigate):
    header, add_col, logout_col = st.columns([6, 1, 1])
    with header:
        st.title("My movies")
    with add_col:
        if st.button("➕ Add", key="add_movie"):
            navigate("add")
    with logout_col:
        if st.button("Logout", key="logout"):
            auth.logout()
            st.session_state.pop("movies", None)
            st.session_state.pop("movies_loaded", None)
            navigate("list")

    query = st.text_input("Search by title", key="movie_search")
    load_movies(movies, st.session_state, query)
    state = movies.snapshot

    if state["error"]:
        st.error(f"Error: {state['error']}")
        if st.button("Retry"):
            movies.fetch_movies()
            st.rerun()
        return

    if not state["movies"]:
        if query:
            st.info("No movies match your search.")
            return
        st.subheader("Your movie list is empty")
        if st.button("Add a new movie"):
            navigate("add")
        return

    render_grid(state["movies"], api, navigate)

    if not query and state["totalPages"] > 1:
        render_pagination(movies)


def load_movies(movies: MovieStore, session, query):
    """
    Fetches what the list page shows. A fresh load (first visit, after a
    mutation, or after the search box is cleared) always starts on page 1,
    where the newest movies are.
    """
    if query:
        if session.get("last_search") != query:
            movies.search_movies(query)
            session["last_search"] = query
        return

    if session.pop("last_search", None) is not None or not session.get("movies_loaded"):
        movies.fetch_movies(1)
        session["movies_loaded"] = True


def render_grid(items, api: MovieApi, navigate):
    for start in range(0, len(items), COLUMNS):
        cols = st.columns(COLUMNS)
        for col, movie in zip(cols, items[start:start + COLUMNS]):
            with col:
                poster = api.poster_url(movie.get("posterUrl"))
                if poster:
                    st.image(poster, width="stretch")
                else:
                    st.markdown("🖼️ *No poster*")
                st.markdown(f"**{movie['title']}**")
                st.caption(str(movie["releaseYear"]))
                if st.button("View", key=f"view-{movie['id']}"):
                    navigate("detail", movie_id=movie["id"])


def render_pagination(movies: MovieStore):
    state = movies.snapshot
    prev_col, label_col, next_col = st.columns([1, 2, 1])
    with prev_col:
        if st.button("Prev", disabled=state["currentPage"] <= 1):
            movies.fetch_movies(state["currentPage"] - 1)
            st.rerun()
    with label_col:
        st.markdown(f"Page {state['currentPage']} of {state['totalPages']}")
    with next_col:
        if st.button("Next", disabled=state["currentPage"] >= state["totalPages"]):
            movies.fetch_movies(state["currentPage"] + 1)
            st.rerun()


def movie_detail_page(movies: MovieStore, api: MovieApi, movie_id, navigate):
    if st.button("← Back"):
        navigate("list")

    try:
        movie = api.get_movie(movie_id)
    except ApiError as e:
        st.error(e.message if e.status_code != 404 else "Movie not found")
        return

    poster_col, info_col = st.columns([1, 2])
    with poster_col:
        poster = api.poster_url(movie.get("posterUrl"))
        if poster:
            st.image(poster, width="stretch")
    with info_col:
        st.title(movie["title"])
        st.subheader(str(movie["releaseYear"]))

        if st.button("✏️ Edit"):
            navigate("edit", movie_id=movie_id)

        if st.button("🗑️ Delete"):
            st.session_state["confirm_delete"] = movie_id

        if st.session_state.get("confirm_delete") == movie_id:
            st.warning(f"Delete '{movie['title']}'?")
            if st.button("Yes, delete", key="confirm_delete_yes"):
                try:
                    movies.delete_movie(movie_id)
                except ApiError as e:
                    st.error(e.message or "Failed to delete movie")
                    return
                st.session_state.pop("confirm_delete", None)
                st.session_state["movies_loaded"] = False
                navigate("list")
            if st.button("Cancel", key="confirm_delete_no"):
                st.session_state.pop("confirm_delete", None)
                st.rerun()
