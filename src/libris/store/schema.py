# ABOUTME: SQL DDL for the local Libris catalog database.
# ABOUTME: One books table keyed by opaque id, with a unique catalog code.

SCHEMA_VERSION = 1

SCHEMA_V1 = """
-- Core book catalog table
CREATE TABLE books (
    seq           INTEGER PRIMARY KEY AUTOINCREMENT,
    id            TEXT NOT NULL,
    catalog_code  TEXT NOT NULL,
    title         TEXT NOT NULL,
    authors       TEXT NOT NULL DEFAULT '[]',
    publisher     TEXT NOT NULL DEFAULT '',
    edition       TEXT NOT NULL DEFAULT '',
    year          TEXT NOT NULL DEFAULT '',
    location      TEXT NOT NULL DEFAULT '',
    isbn          TEXT NOT NULL DEFAULT '',
    language      TEXT NOT NULL,
    category      TEXT NOT NULL,
    subjects      TEXT NOT NULL DEFAULT '[]',
    review        TEXT NOT NULL DEFAULT '',
    created_at    TEXT NOT NULL,
    updated_at    TEXT NOT NULL
);

CREATE UNIQUE INDEX idx_books_id ON books(id);
CREATE UNIQUE INDEX idx_books_catalog_code ON books(catalog_code);

CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);
"""
