import enum
import sys
from concurrent import futures

import grpc
from loguru import logger

import bookstore_pb2_grpc
from bookstore_service import Bookstore
from mongo_service import BookCollection, StoreError
from settings import configure_logging, settings


class ServerState(enum.Enum):
    INITIALIZING = "initializing"
    SERVING = "serving"
    DRAINING = "draining"
    STOPPED = "stopped"


class BookServer:
    """Hosts the Bookstore servicer on a gRPC port and owns the store connection."""

    def __init__(self, books, port=9090, max_workers=10):
        self.state = ServerState.INITIALIZING
        self.books = books
        self.server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers))
        bookstore_pb2_grpc.add_BookstoreServicer_to_server(Bookstore(books), self.server)
        # port 0 lets the OS pick one; keep what was actually bound
        self.port = self.server.add_insecure_port(f"[::]:{port}")

    def start(self):
        self.server.start()
        self.state = ServerState.SERVING
        logger.info("Bookstore server started on port {}", self.port)

    def stop(self, grace=None):
        if self.state is ServerState.STOPPED:
            return
        self.state = ServerState.DRAINING
        logger.info("Stopping Bookstore server...")
        self.server.stop(grace).wait()
        logger.info("Closing MongoDB connection")
        self.books.close()
        self.state = ServerState.STOPPED
        logger.info("All done!")

    def wait_for_termination(self, timeout=None):
        return self.server.wait_for_termination(timeout)


def open_store(config):
    """Connect to the configured collection and bring legacy documents up to date."""
    books = BookCollection.connect(
        config.mongo_uri,
        database=config.mongo_database,
        collection=config.mongo_collection,
        timeout_ms=config.mongo_timeout_ms)
    try:
        renamed = books.migrate_legacy_fields()
    except StoreError:
        books.close()
        raise
    if renamed:
        logger.info("Renamed {} legacy field(s) on stored books", renamed)
    return books


def main():
    configure_logging(settings.log_level)
    if len(sys.argv) == 1:
        port = settings.rpc_port
    elif len(sys.argv) == 2:
        port = int(sys.argv[1])
    else:
        sys.exit(f"Usage: {sys.argv[0]} [rpc-port]")

    try:
        books = open_store(settings)
    except StoreError as e:
        sys.exit(f"Could not open MongoDB store: {e}")

    server = BookServer(books, port=port, max_workers=settings.rpc_max_workers)
    server.start()
    try:
        server.wait_for_termination()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        server.stop()


if __name__ == "__main__":
    main()
