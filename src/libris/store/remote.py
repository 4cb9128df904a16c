# ABOUTME: Remote CollectionStore backed by a hosted document database's REST API.
# ABOUTME: Books live as documents in a "books" collection; ids are the document ids.

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any

from libris.catalog.types import Book, BookFormData
from libris.config import DEFAULT_DATABASE
from libris.store.base import NotFound, StoreUnavailable
from libris.store.documents import (
    decode_book,
    document_id,
    encode_book,
    encode_form_fields,
    encode_value,
)
from libris.store.http import HttpClient, HttpStatusError, RemoteFetchError

logger = logging.getLogger(__name__)

_API_BASE = "https://firestore.googleapis.com/v1"
COLLECTION = "books"
_PAGE_SIZE = 300


class RemoteStore:
    """Collection store backed by the document database REST API.

    Uses a dependency-injected HttpClient for testability. Transport
    failures map to StoreUnavailable and HTTP 404 to NotFound.
    """

    def __init__(
        self,
        http_client: HttpClient,
        project_id: str,
        *,
        database: str = DEFAULT_DATABASE,
        base_url: str = _API_BASE,
    ) -> None:
        self._http = http_client
        self._documents_url = (
            f"{base_url}/projects/{project_id}/databases/{database}/documents"
        )

    @property
    def name(self) -> str:
        return "remote"

    @property
    def collection_url(self) -> str:
        return f"{self._documents_url}/{COLLECTION}"

    def _document_url(self, book_id: str) -> str:
        return f"{self.collection_url}/{book_id}"

    def _call(
        self,
        method: str,
        url: str,
        *,
        book_id: str | None = None,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        try:
            return self._http.request(method, url, params=params, json=json)
        except HttpStatusError as exc:
            if exc.status_code == 404 and book_id is not None:
                raise NotFound(book_id) from exc
            raise StoreUnavailable(f"Remote store rejected {method} {url}: {exc}") from exc
        except RemoteFetchError as exc:
            raise StoreUnavailable(f"Remote store unreachable: {exc}") from exc

    def load_all(self) -> list[Book]:
        """Fetch every book document, newest first.

        Follows nextPageToken until the listing is exhausted.
        """
        books: list[Book] = []
        params: dict[str, Any] = {"pageSize": str(_PAGE_SIZE), "orderBy": "createdAt desc"}
        while True:
            data = self._call("GET", self.collection_url, params=params)
            for doc in data.get("documents", []):
                try:
                    books.append(decode_book(doc))
                except (KeyError, TypeError, ValueError) as exc:
                    raise StoreUnavailable(
                        f"Undecodable document {doc.get('name')}: {exc}"
                    ) from exc
            token = data.get("nextPageToken")
            if not token:
                break
            params = {**params, "pageToken": token}
        logger.debug("Loaded %d book(s) from %s", len(books), self.collection_url)
        return books

    def insert(self, book: Book) -> Book:
        """Create a document for the book and return it with the document id.

        The document database assigns the id, so the returned Book carries
        that id in place of the one it was given.
        """
        data = self._call("POST", self.collection_url, json=encode_book(book))
        stored = replace(book, id=document_id(data))
        logger.debug("Inserted %s as document %s", book.catalog_code, stored.id)
        return stored

    def update(self, book_id: str, form_data: BookFormData, *, updated_at: datetime) -> None:
        """Patch the editable fields and updatedAt of an existing document.

        Raises:
            NotFound: If no document has this id.
        """
        fields = encode_form_fields(form_data)
        fields["updatedAt"] = encode_value(updated_at)
        params = {
            "updateMask.fieldPaths": list(fields),
            "currentDocument.exists": "true",
        }
        self._call(
            "PATCH",
            self._document_url(book_id),
            book_id=book_id,
            params=params,
            json={"fields": fields},
        )

    def delete(self, book_id: str) -> None:
        """Delete a document.

        Raises:
            NotFound: If no document has this id.
        """
        self._call(
            "DELETE",
            self._document_url(book_id),
            book_id=book_id,
            params={"currentDocument.exists": "true"},
        )

    def close(self) -> None:
        self._http.close()
