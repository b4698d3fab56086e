"""Client and server classes for the bookstore.Bookstore service."""
import grpc

import bookstore_pb2 as bookstore__pb2


class BookstoreStub(object):
    """CRUD over the book catalog."""

    def __init__(self, channel):
        """Constructor.

        Args:
            channel: A grpc.Channel.
        """
        self.PostBook = channel.unary_unary(
                '/bookstore.Bookstore/PostBook',
                request_serializer=bookstore__pb2.PostBookReq.SerializeToString,
                response_deserializer=bookstore__pb2.PostBookRes.FromString,
                )
        self.GetBook = channel.unary_unary(
                '/bookstore.Bookstore/GetBook',
                request_serializer=bookstore__pb2.GetBookReq.SerializeToString,
                response_deserializer=bookstore__pb2.GetBookRes.FromString,
                )
        self.UpdateBook = channel.unary_unary(
                '/bookstore.Bookstore/UpdateBook',
                request_serializer=bookstore__pb2.UpdateBookReq.SerializeToString,
                response_deserializer=bookstore__pb2.UpdateBookRes.FromString,
                )
        self.DeleteBook = channel.unary_unary(
                '/bookstore.Bookstore/DeleteBook',
                request_serializer=bookstore__pb2.DeleteBookReq.SerializeToString,
                response_deserializer=bookstore__pb2.DeleteBookRes.FromString,
                )
        self.GetAllBooks = channel.unary_stream(
                '/bookstore.Bookstore/GetAllBooks',
                request_serializer=bookstore__pb2.GetAllReq.SerializeToString,
                response_deserializer=bookstore__pb2.GetAllRes.FromString,
                )


class BookstoreServicer(object):
    """CRUD over the book catalog."""

    def PostBook(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def GetBook(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def UpdateBook(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def DeleteBook(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def GetAllBooks(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')


def add_BookstoreServicer_to_server(servicer, server):
    rpc_method_handlers = {
            'PostBook': grpc.unary_unary_rpc_method_handler(
                    servicer.PostBook,
                    request_deserializer=bookstore__pb2.PostBookReq.FromString,
                    response_serializer=bookstore__pb2.PostBookRes.SerializeToString,
            ),
            'GetBook': grpc.unary_unary_rpc_method_handler(
                    servicer.GetBook,
                    request_deserializer=bookstore__pb2.GetBookReq.FromString,
                    response_serializer=bookstore__pb2.GetBookRes.SerializeToString,
            ),
            'UpdateBook': grpc.unary_unary_rpc_method_handler(
                    servicer.UpdateBook,
                    request_deserializer=bookstore__pb2.UpdateBookReq.FromString,
                    response_serializer=bookstore__pb2.UpdateBookRes.SerializeToString,
            ),
            'DeleteBook': grpc.unary_unary_rpc_method_handler(
                    servicer.DeleteBook,
                    request_deserializer=bookstore__pb2.DeleteBookReq.FromString,
                    response_serializer=bookstore__pb2.DeleteBookRes.SerializeToString,
            ),
            'GetAllBooks': grpc.unary_stream_rpc_method_handler(
                    servicer.GetAllBooks,
                    request_deserializer=bookstore__pb2.GetAllReq.FromString,
                    response_serializer=bookstore__pb2.GetAllRes.SerializeToString,
            ),
    }
    generic_handler = grpc.method_handlers_generic_handler(
            'bookstore.Bookstore', rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))
