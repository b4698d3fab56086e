import grpc
from loguru import logger

import bookstore_pb2
import bookstore_pb2_grpc
from mongo_service import BookNotFound, StoreError


def book_to_document(book):
    return {
        "bookId": book.book_id,
        "bookName": book.book_name,
        "title": book.title,
        "author": book.author,
    }


def document_to_book(document):
    title = document.get("title")
    if title is None:
        title = document.get("category", "")
    return bookstore_pb2.Book(
        book_id=document.get("bookId", ""),
        book_name=document.get("bookName", ""),
        title=title,
        author=document.get("author", ""),
    )


class Bookstore(bookstore_pb2_grpc.BookstoreServicer):
    def __init__(self, books):
        self.books = books

    def PostBook(self, request, context):
        try:
            oid = self.books.insert(book_to_document(request.book))
        except StoreError as e:
            logger.error("PostBook {!r} failed: {}", request.book.book_id, e)
            context.abort(grpc.StatusCode.INTERNAL, f"Internal error: {e}")
        logger.info("Inserted book {!r} as {}", request.book.book_id, oid)
        return bookstore_pb2.PostBookRes(book=request.book, oid=oid)

    def GetBook(self, request, context):
        try:
            document = self.books.find_one(request.id)
        except BookNotFound as e:
            context.abort(grpc.StatusCode.NOT_FOUND, str(e))
        except StoreError as e:
            logger.error("GetBook {!r} failed: {}", request.id, e)
            context.abort(grpc.StatusCode.INTERNAL, f"Internal error: {e}")
        return bookstore_pb2.GetBookRes(book=document_to_book(document))

    def UpdateBook(self, request, context):
        book = request.book
        try:
            matched = self.books.update_one(book.book_id, book_to_document(book))
        except StoreError as e:
            logger.error("UpdateBook {!r} failed: {}", book.book_id, e)
            context.abort(grpc.StatusCode.INTERNAL, f"Internal error: {e}")
        if not matched:
            context.abort(grpc.StatusCode.NOT_FOUND, str(BookNotFound(book.book_id)))
        logger.info("Updated book {!r}", book.book_id)
        return bookstore_pb2.UpdateBookRes(book=book)

    def DeleteBook(self, request, context):
        try:
            deleted = self.books.delete_one(request.id)
        except StoreError as e:
            logger.error("DeleteBook {!r} failed: {}", request.id, e)
            context.abort(grpc.StatusCode.INTERNAL, f"Internal error: {e}")
        logger.info("Deleted {} book(s) with bookId {!r}", deleted, request.id)
        return bookstore_pb2.DeleteBookRes(deleted=deleted, success=deleted == 1)

    def GetAllBooks(self, request, context):
        sent = 0
        try:
            for document in self.books.find_all():
                yield bookstore_pb2.GetAllRes(book=document_to_book(document))
                sent += 1
        except StoreError as e:
            logger.error("GetAllBooks aborted after {} book(s): {}", sent, e)
            context.abort(grpc.StatusCode.INTERNAL, f"Internal error: {e}")
        logger.info("Streamed {} book(s)", sent)
