"""
Streamlit UI for Movie Finder.

Talks to the movies API (``movie-finder serve``) through MovieApiClient and
keeps query results in a per-session QueryCache.

Run UI:  movie-finder ui   (or: streamlit run src/movie_finder/frontend/app.py)
"""

from typing import List

import streamlit as st

from movie_finder.config import ConfigManager, FrontendConfig
from movie_finder.core.models import FavoritesPage, Movie, SearchPage, SearchResultMovie
from movie_finder.frontend.api_client import MovieApiClient
from movie_finder.frontend.pagination import (
    fetch_favorites_in_range,
    page_after_removal,
    search_total_pages,
)
from movie_finder.frontend.query_cache import FAVORITES, SEARCH, QueryCache
from movie_finder.utils import MovieFinderError

GRID_COLUMNS = 5


@st.cache_resource
def get_settings() -> FrontendConfig:
    """Frontend settings, loaded once per server process."""
    return ConfigManager().load_frontend_config()


@st.cache_resource
def get_client() -> MovieApiClient:
    """API client shared by all sessions."""
    settings = get_settings()
    return MovieApiClient(settings.api_url, timeout=settings.request_timeout)


def get_cache() -> QueryCache:
    """Query cache of the current browser session."""
    if "query_cache" not in st.session_state:
        st.session_state.query_cache = QueryCache(ttl_seconds=get_settings().cache_ttl_seconds)
    return st.session_state.query_cache


def init_state() -> None:
    defaults = {
        "search_query": "",
        "search_page": 1,
        "favorites_page": 1,
        "error": None,
    }
    for key, value in defaults.items():
        st.session_state.setdefault(key, value)


def toggle_favorite(movie: Movie, is_favorite: bool) -> None:
    """Add or remove a favorite, then drop cached lists that it affects."""
    client = get_client()
    st.session_state.error = None
    try:
        if is_favorite:
            client.remove_from_favorites(movie.imdb_id)
        else:
            client.add_to_favorites(movie)
    except (MovieFinderError, ValueError) as e:
        st.session_state.error = str(e) or "Failed to update favorites"
        return
    get_cache().invalidate_after_mutation()


def remove_from_favorites_page(movie: Movie, items_on_page: int) -> None:
    toggle_favorite(movie, is_favorite=True)
    if st.session_state.error is None:
        st.session_state.favorites_page = page_after_removal(
            st.session_state.favorites_page, items_on_page
        )


def set_page(key: str, page: int) -> None:
    st.session_state[key] = page


def render_poster(movie: Movie) -> None:
    if movie.has_poster:
        st.image(movie.poster, width="stretch")
    else:
        st.markdown(
            "<div style='aspect-ratio:2/3;display:flex;align-items:center;"
            "justify-content:center;background:#f3f4f6;color:#6b7280'>No Image</div>",
            unsafe_allow_html=True,
        )


def render_movie_grid(movies: List[Movie], on_favorites_page: bool) -> None:
    """Render movie cards with a favorite toggle each."""
    columns = st.columns(GRID_COLUMNS)
    for index, movie in enumerate(movies):
        is_favorite = on_favorites_page or (
            isinstance(movie, SearchResultMovie) and movie.is_favorite
        )
        with columns[index % GRID_COLUMNS]:
            render_poster(movie)
            st.markdown(f"**{movie.title}**")
            st.caption(str(movie.year) if movie.year else "N/A")

            label = "♥ Remove from favorites" if is_favorite else "♡ Add to favorites"
            key = f"{'fav' if on_favorites_page else 'search'}-{movie.imdb_id}"
            if on_favorites_page:
                st.button(
                    label,
                    key=key,
                    on_click=remove_from_favorites_page,
                    args=(movie, len(movies)),
                )
            else:
                st.button(label, key=key, on_click=toggle_favorite, args=(movie, is_favorite))


def render_pagination(state_key: str, current_page: int, total_pages: int) -> None:
    if total_pages <= 1:
        return

    prev_col, info_col, next_col = st.columns([1, 2, 1])
    with prev_col:
        st.button(
            "← Previous",
            key=f"{state_key}-prev",
            disabled=current_page <= 1,
            on_click=set_page,
            args=(state_key, current_page - 1),
        )
    with info_col:
        st.markdown(f"Page {current_page} of {total_pages}")
    with next_col:
        st.button(
            "Next →",
            key=f"{state_key}-next",
            disabled=current_page >= total_pages,
            on_click=set_page,
            args=(state_key, current_page + 1),
        )


def render_search_page() -> None:
    st.title("Movie Finder")

    with st.form("search-form"):
        query = st.text_input("Search movies", value=st.session_state.search_query)
        submitted = st.form_submit_button("Search", type="primary")

    if submitted:
        if not query.strip():
            st.session_state.error = "Please enter a search query"
        else:
            st.session_state.error = None
            st.session_state.search_query = query.strip()
            st.session_state.search_page = 1

    if st.session_state.error:
        st.error(st.session_state.error)

    search_query = st.session_state.search_query
    if not search_query:
        st.subheader("Start Your Search")
        st.caption("Search for your favorite movies and add them to your favorites")
        return

    page = st.session_state.search_page
    client = get_client()
    try:
        with st.spinner("Searching for movies..."):
            results: SearchPage = get_cache().fetch(
                SEARCH, search_query, page, lambda: client.search_movies(search_query, page)
            )
    except MovieFinderError as e:
        st.subheader("Search Error")
        st.error(str(e))
        return

    if not results.movies:
        st.info(f'No movies found for "{search_query}"')
        return

    render_movie_grid(results.movies, on_favorites_page=False)
    total_pages = search_total_pages(results.total_results, get_settings().page_size)
    render_pagination("search_page", page, total_pages)


def render_favorites_page() -> None:
    st.title("My Favorites")

    client = get_client()
    cache = get_cache()

    def fetch(number: int) -> FavoritesPage:
        return cache.fetch(FAVORITES, "", number, lambda: client.get_favorites(number))

    try:
        with st.spinner("Loading favorites..."):
            favorites, page = fetch_favorites_in_range(st.session_state.favorites_page, fetch)
    except MovieFinderError as e:
        st.error(str(e))
        return

    st.session_state.favorites_page = page

    total = int(favorites.total_results or 0)
    st.caption(f"{total} {'movie' if total == 1 else 'movies'} saved")

    if st.session_state.error:
        st.error(st.session_state.error)

    if total == 0:
        st.subheader("No Favorites Yet")
        st.caption("Start adding movies to your favorites from the search page")
        return

    render_movie_grid(favorites.favorites, on_favorites_page=True)
    render_pagination("favorites_page", page, favorites.total_pages)


def main() -> None:
    st.set_page_config(page_title="Movie Finder", layout="wide")
    init_state()

    with st.sidebar:
        st.header("Movie Finder")
        page = st.radio("Page", ["Search", "Favorites"], label_visibility="collapsed")
        st.caption(f"API: {get_settings().api_url}")

    if page == "Search":
        render_search_page()
    else:
        render_favorites_page()


if __name__ == "__main__":
    main()
