"""Message classes for bookstore.proto.

The file descriptor is assembled with descriptor_pb2 so the package works
without a protoc build step; the tests compile bookstore.proto and check
the two agree.
"""
from google.protobuf import descriptor_pb2
from google.protobuf import descriptor_pool
from google.protobuf import message_factory

_Field = descriptor_pb2.FieldDescriptorProto

MESSAGES = {
    "Book": [
        ("book_id", 1, _Field.TYPE_STRING),
        ("book_name", 2, _Field.TYPE_STRING),
        ("title", 3, _Field.TYPE_STRING),
        ("author", 4, _Field.TYPE_STRING),
    ],
    "PostBookReq": [("book", 1, "Book")],
    "PostBookRes": [("book", 1, "Book"), ("oid", 2, _Field.TYPE_STRING)],
    "GetBookReq": [("id", 1, _Field.TYPE_STRING)],
    "GetBookRes": [("book", 1, "Book")],
    "UpdateBookReq": [("book", 1, "Book")],
    "UpdateBookRes": [("book", 1, "Book")],
    "DeleteBookReq": [("id", 1, _Field.TYPE_STRING)],
    "DeleteBookRes": [("deleted", 1, _Field.TYPE_INT64), ("success", 2, _Field.TYPE_BOOL)],
    "GetAllReq": [],
    "GetAllRes": [("book", 1, "Book")],
}

# (name, request, response, server_streaming)
METHODS = [
    ("PostBook", "PostBookReq", "PostBookRes", False),
    ("GetBook", "GetBookReq", "GetBookRes", False),
    ("UpdateBook", "UpdateBookReq", "UpdateBookRes", False),
    ("DeleteBook", "DeleteBookReq", "DeleteBookRes", False),
    ("GetAllBooks", "GetAllReq", "GetAllRes", True),
]


def _file_descriptor_proto():
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="bookstore.proto", package="bookstore", syntax="proto3")
    for message_name, fields in MESSAGES.items():
        message = file_proto.message_type.add(name=message_name)
        for field_name, number, field_type in fields:
            field = message.field.add(name=field_name, number=number, label=_Field.LABEL_OPTIONAL)
            if isinstance(field_type, str):
                field.type = _Field.TYPE_MESSAGE
                field.type_name = f".bookstore.{field_type}"
            else:
                field.type = field_type
    service = file_proto.service.add(name="Bookstore")
    for method_name, request, response, streaming in METHODS:
        service.method.add(
            name=method_name,
            input_type=f".bookstore.{request}",
            output_type=f".bookstore.{response}",
            server_streaming=streaming)
    return file_proto


DESCRIPTOR = descriptor_pool.Default().AddSerializedFile(_file_descriptor_proto().SerializeToString())

Book = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["Book"])
PostBookReq = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["PostBookReq"])
PostBookRes = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["PostBookRes"])
GetBookReq = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["GetBookReq"])
GetBookRes = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["GetBookRes"])
UpdateBookReq = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["UpdateBookReq"])
UpdateBookRes = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["UpdateBookRes"])
DeleteBookReq = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["DeleteBookReq"])
DeleteBookRes = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["DeleteBookRes"])
GetAllReq = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["GetAllReq"])
GetAllRes = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["GetAllRes"])
