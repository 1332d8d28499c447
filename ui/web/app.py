"""Demostración en Streamlit de la búsqueda del sitio."""
from __future__ import annotations

import asyncio

import streamlit as st

from application.services.snippets import highlight
from domain.entities import SearchOptions
from infrastructure.config import Container, build_default_container
from ui.logging_utils import setup_logging


@st.cache_resource
def _load_container() -> Container:
    setup_logging()
    container = build_default_container()
    asyncio.run(container.engine.rebuild(container.collectors))
    return container


st.set_page_config(page_title="Búsqueda del sitio")
container = _load_container()
engine = container.engine
st.title("Búsqueda del sitio")

filters = engine.index_store.available_filters()
search_query = st.text_input("Buscar", value="")
col_category, col_kind = st.columns(2)
category = col_category.selectbox("Categoría", ["", *filters["categories"]])
kind = col_kind.selectbox("Tipo", ["", *filters["kinds"]])
authenticated = st.checkbox("Sesión iniciada", value=False)

if search_query:
    response = engine.search(
        search_query,
        SearchOptions(
            category=category or None,
            kind=kind or None,
            limit=engine.default_limit,
            include_snippet=True,
            is_authenticated=authenticated,
        ),
    )
    st.caption(f"{response.total_matched} resultados en {response.elapsed_seconds * 1000:.2f} ms")
    for suggestion in response.suggestions:
        st.info(suggestion)
    for result in response.results:
        st.markdown(f"**[{result.document.title}]({result.document.url})** · {result.document.category}")
        if result.snippet is not None:
            st.markdown(highlight(result.snippet.text, result.snippet.highlights, opening="**", closing="**"))
        st.caption(f"Relevancia: {result.score:.1f}")

with st.sidebar:
    stats = engine.stats()
    st.metric("Documentos indexados", stats.index_size)
    st.metric("Búsquedas guardadas", stats.history_size)
    for query, frequency in stats.most_searched:
        st.write(f"{query} ({frequency})")
    if st.button("Reindexar"):
        report = asyncio.run(engine.reindex())
        st.success(f"{report.indexed} documentos indexados")
