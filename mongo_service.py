import functools

from loguru import logger
from pymongo import MongoClient
from pymongo.errors import PyMongoError

BOOK_FIELDS = ("bookId", "bookName", "title", "author")
LEGACY_FIELDS = {"bookid": "bookId", "bookname": "bookName", "category": "title"}


class StoreError(Exception):
    pass


class BookNotFound(StoreError):
    def __init__(self, book_id):
        super().__init__(f"Could not find book with bookId {book_id!r}")
        self.book_id = book_id


def _store_errors(method):
    """Re-raise driver errors from `method` as StoreError."""
    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except PyMongoError as e:
            raise StoreError(f"{method.__name__} failed: {e}") from e
    return wrapper


class BookCollection:
    def __init__(self, collection):
        self.collection = collection

    @classmethod
    def connect(cls, uri, database="Bookstore", collection="books", timeout_ms=10000):
        """Open a client against `uri` and check it answers a ping before handing it out."""
        logger.info("Connecting to MongoDB at {}", uri)
        client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
        books = cls(client[database][collection])
        try:
            books.ping()
        except StoreError:
            client.close()
            raise
        logger.info("Connected to MongoDB, using {}.{}", database, collection)
        return books

    @_store_errors
    def ping(self):
        self.collection.database.command("ping")

    @_store_errors
    def insert(self, document):
        result = self.collection.insert_one({field: document.get(field, "") for field in BOOK_FIELDS})
        return str(result.inserted_id)

    @_store_errors
    def find_one(self, book_id):
        document = self.collection.find_one({"bookId": book_id})
        if document is None:
            raise BookNotFound(book_id)
        return document

    @_store_errors
    def update_one(self, book_id, fields):
        result = self.collection.update_one({"bookId": book_id}, {"$set": fields})
        return result.matched_count

    @_store_errors
    def delete_one(self, book_id):
        result = self.collection.delete_one({"bookId": book_id})
        return result.deleted_count

    def find_all(self):
        """Yields every stored document, in whatever order the server returns them."""
        try:
            with self.collection.find({}) as cursor:
                for document in cursor:
                    yield document
        except PyMongoError as e:
            raise StoreError(f"find_all failed: {e}") from e

    @_store_errors
    def migrate_legacy_fields(self):
        """Rename legacy keys to the current ones, returning how many fields were renamed.

        Older writers stored lowercase `bookid`/`bookname` and used `category`
        where current documents use `title`. A key is left alone when its
        current name is already present on the document.
        """
        renamed = 0
        for legacy, current in LEGACY_FIELDS.items():
            result = self.collection.update_many(
                {legacy: {"$exists": True}, current: {"$exists": False}},
                {"$rename": {legacy: current}})
            renamed += result.modified_count
        return renamed

    def close(self):
        self.collection.database.client.close()
