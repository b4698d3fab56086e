"""HTTP gateway translating REST calls on /api/book into Bookstore RPCs."""
import grpc
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

import bookstore_pb2
import bookstore_pb2_grpc
from settings import configure_logging, settings

HTTP_STATUS = {
    grpc.StatusCode.NOT_FOUND: 404,
    grpc.StatusCode.INVALID_ARGUMENT: 400,
    grpc.StatusCode.UNAVAILABLE: 502,
    grpc.StatusCode.DEADLINE_EXCEEDED: 504,
}


class BookPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    book_id: str = Field("", alias="bookId")
    book_name: str = Field("", alias="bookName")
    title: str = Field("", validation_alias=AliasChoices("title", "category"))
    author: str = ""

    def to_proto(self, book_id=None):
        return bookstore_pb2.Book(
            book_id=self.book_id if book_id is None else book_id,
            book_name=self.book_name,
            title=self.title,
            author=self.author,
        )


def book_to_json(book):
    return {
        "bookId": book.book_id,
        "bookName": book.book_name,
        "title": book.title,
        "author": book.author,
    }


def create_app(stub, timeout=10.0):
    """Build the gateway around an already connected BookstoreStub."""
    app = FastAPI(title="Bookstore gateway")

    @app.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError):
        messages = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            messages.append(f"{location}: {error['msg']}" if location else error["msg"])
        return JSONResponse(status_code=400, content={"error": "; ".join(messages) or "invalid request body"})

    @app.exception_handler(grpc.RpcError)
    async def rpc_error(request: Request, exc: grpc.RpcError):
        code = exc.code() if hasattr(exc, "code") else grpc.StatusCode.UNKNOWN
        details = exc.details() if hasattr(exc, "details") else str(exc)
        status = HTTP_STATUS.get(code, 500)
        logger.warning("{} {} -> {} ({}: {})", request.method, request.url.path, status, code.name, details)
        return JSONResponse(status_code=status, content={"error": details})

    @app.get("/api/book/")
    def list_books():
        responses = stub.GetAllBooks(bookstore_pb2.GetAllReq(), timeout=timeout)
        return [book_to_json(response.book) for response in responses]

    @app.get("/api/book/{book_id}")
    def get_book(book_id: str):
        response = stub.GetBook(bookstore_pb2.GetBookReq(id=book_id), timeout=timeout)
        return book_to_json(response.book)

    @app.post("/api/book/")
    def post_book(payload: BookPayload):
        request = bookstore_pb2.PostBookReq(book=payload.to_proto())
        response = stub.PostBook(request, timeout=timeout)
        return {"book": book_to_json(response.book), "oid": response.oid}

    @app.put("/api/book/{book_id}")
    def update_book(book_id: str, payload: BookPayload):
        request = bookstore_pb2.UpdateBookReq(book=payload.to_proto(book_id=book_id))
        response = stub.UpdateBook(request, timeout=timeout)
        return book_to_json(response.book)

    @app.delete("/api/book/{book_id}")
    def delete_book(book_id: str):
        response = stub.DeleteBook(bookstore_pb2.DeleteBookReq(id=book_id), timeout=timeout)
        return {"success": response.success, "deletedCount": response.deleted}

    return app


def main():
    configure_logging(settings.log_level)
    logger.info("Connecting to Bookstore service at {}", settings.rpc_target)
    with grpc.insecure_channel(settings.rpc_target) as channel:
        app = create_app(bookstore_pb2_grpc.BookstoreStub(channel), timeout=settings.rpc_timeout)
        uvicorn.run(app, host=settings.http_host, port=settings.http_port)


if __name__ == "__main__":
    main()
