"""
Tests for the FastAPI dependencies and exception handlers.
"""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from sqlmodel import Session

from webapi_helper.api import FormBodyDep, register_exception_handlers, search_service_dependency
from webapi_helper.search import full_text_searchable, initial_search_predicate
from webapi_helper.services import SearchService
from tests.entities import Contact

FORM_HEADERS = {"content-type": "application/x-www-form-urlencoded"}


@pytest.fixture
def client(engine, contacts):
    def get_session():
        with Session(engine) as session:
            yield session

    get_search_service = search_service_dependency(get_session)

    app = FastAPI()
    register_exception_handlers(app)

    @app.post("/form")
    async def echo_form(form: FormBodyDep) -> dict:
        return {key: form.getlist(key) for key in form.keys()}

    @app.get("/contacts/search")
    def search_contacts(
        q: str = "",
        include_time: bool = False,
        service: SearchService = Depends(get_search_service),
    ) -> list[str]:
        results = service.search(
            Contact, q, include_time=include_time, order_by=Contact.contact_id
        )
        return [contact.first_name for contact in results]

    @app.get("/contacts/flags")
    def search_flags(q: str = "") -> list[str]:
        full_text_searchable(initial_search_predicate(q), Contact.name_style, q)
        return []

    return TestClient(app)


class TestFormBody:
    """Tests for the form body dependency."""

    def test_parses_body(self, client):
        response = client.post("/form", content="a=1&b=2&a=3", headers=FORM_HEADERS)

        assert response.status_code == 200
        assert response.json() == {"a": ["1", "3"], "b": ["2"]}

    def test_empty_body(self, client):
        response = client.post("/form", content="", headers=FORM_HEADERS)

        assert response.status_code == 200
        assert response.json() == {}

    def test_malformed_body(self, client):
        response = client.post("/form", content="a=1&broken", headers=FORM_HEADERS)

        assert response.status_code == 400
        body = response.json()
        assert body["segment"] == "broken"
        assert body["index"] == 1
        assert "Malformed form segment" in body["detail"]

    def test_undecodable_body(self, client):
        response = client.post("/form", content=b"a=\xff", headers=FORM_HEADERS)

        assert response.status_code == 400
        assert response.json()["encoding"] == "utf-8"


class TestSearchEndpoint:
    """Tests for a search route built on SearchService."""

    def test_search(self, client):
        response = client.get("/contacts/search", params={"q": "whisk"})

        assert response.status_code == 200
        assert response.json() == ["MrWhiskers"]

    def test_blank_search(self, client):
        response = client.get("/contacts/search")

        assert response.json() == ["MrWhiskers", "NoSearchUser", "Garfield"]

    def test_padded_date_term(self, client):
        response = client.get("/contacts/search", params={"q": " 05/05/2016 "})

        assert response.status_code == 200
        assert response.json() == ["MrWhiskers"]

    def test_oversized_integer_term(self, client):
        response = client.get("/contacts/search", params={"q": "99999999999999999999"})

        assert response.status_code == 200
        assert response.json() == []

    def test_unparsable_date_term_is_not_an_error(self, client):
        response = client.get("/contacts/search", params={"q": "banana"})

        assert response.status_code == 200
        assert response.json() == []

    def test_unsupported_field(self, client):
        response = client.get("/contacts/flags", params={"q": "true"})

        assert response.status_code == 400
        assert response.json()["field"] == "name_style"
