"""Streamlit demo: add documents, search and page through results."""
from __future__ import annotations

import streamlit as st

from application.services.paginator import paginate
from application.use_cases.search import search
from domain.entities import DocumentStatus
from domain.errors import InvalidArgumentError
from infrastructure.config import ContainerConfig, build_default_container

st.set_page_config(page_title="SearchServer Demo")
st.title("SearchServer Demo")

if "container" not in st.session_state:
    st.session_state.container = build_default_container(ContainerConfig(stop_words="и в на"))
container = st.session_state.container
server = container.search_server

st.header("Добавить документ")
add_form = st.form("add_document")
document_id = add_form.number_input("ID документа", min_value=0, step=1, value=server.get_document_count())
document_text = add_form.text_area("Текст", value="белый кот и модный ошейник")
document_status = add_form.selectbox("Статус", list(DocumentStatus), format_func=lambda status: status.name)
ratings_text = add_form.text_input("Оценки через пробел", value="8 -3")
if add_form.form_submit_button("Добавить"):
    try:
        ratings = [int(value) for value in ratings_text.split()]
        server.add_document(int(document_id), document_text, document_status, ratings)
    except (InvalidArgumentError, ValueError) as exc:
        st.error(str(exc))
    else:
        st.success(f"Документ {int(document_id)} добавлен")

st.caption(f"Документов в индексе: {server.get_document_count()}")

st.header("Поиск")
query_text = st.text_input("Запрос", value="пушистый ухоженный кот")
search_status = st.selectbox("Искать среди", list(DocumentStatus), format_func=lambda status: status.name)
if st.button("Найти"):
    try:
        results = search(query_text, request_queue=container.request_queue, status_or_predicate=search_status)
    except InvalidArgumentError as exc:
        st.error(str(exc))
    else:
        for number, page in enumerate(paginate(results, container.page_size), start=1):
            st.subheader(f"Страница {number}")
            for document in page:
                st.write({"document_id": document.id, "relevance": round(document.relevance, 6), "rating": document.rating})
    st.caption(f"Запросов без результатов: {container.request_queue.get_no_result_requests()}")
