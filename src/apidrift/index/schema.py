"""SCIP wire schema, declared as a protobuf descriptor.

Only the parts of ``scip.proto`` this tool reads are declared. Field numbers
match the upstream schema, so any conforming index decodes; fields not
declared here (relationships, diagnostics, enclosing ranges, ...) are kept as
unknown fields and ignored.

The descriptor lives in a private pool so it cannot collide with the
upstream ``scip`` bindings if those are installed too.

Message classes: ``Index``, ``Metadata``, ``ToolInfo``, ``Document``,
``Occurrence``, ``SymbolInformation``. Tests use them to build fixtures.
"""

from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_F = descriptor_pb2.FieldDescriptorProto

# (message, [(field name, number, type, label, type_name)])
_MESSAGES: list[tuple[str, list[tuple[str, int, int, int, str | None]]]] = [
    (
        "Index",
        [
            ("metadata", 1, _F.TYPE_MESSAGE, _F.LABEL_OPTIONAL, ".scip.Metadata"),
            ("documents", 2, _F.TYPE_MESSAGE, _F.LABEL_REPEATED, ".scip.Document"),
            ("external_symbols", 3, _F.TYPE_MESSAGE, _F.LABEL_REPEATED, ".scip.SymbolInformation"),
        ],
    ),
    (
        "Metadata",
        [
            ("version", 1, _F.TYPE_INT32, _F.LABEL_OPTIONAL, None),
            ("tool_info", 2, _F.TYPE_MESSAGE, _F.LABEL_OPTIONAL, ".scip.ToolInfo"),
            ("project_root", 3, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
        ],
    ),
    (
        "ToolInfo",
        [
            ("name", 1, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
            ("version", 2, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
            ("arguments", 3, _F.TYPE_STRING, _F.LABEL_REPEATED, None),
        ],
    ),
    (
        "Document",
        [
            ("relative_path", 1, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
            ("occurrences", 2, _F.TYPE_MESSAGE, _F.LABEL_REPEATED, ".scip.Occurrence"),
            ("symbols", 3, _F.TYPE_MESSAGE, _F.LABEL_REPEATED, ".scip.SymbolInformation"),
            ("language", 4, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
        ],
    ),
    (
        "Occurrence",
        [
            ("range", 1, _F.TYPE_INT32, _F.LABEL_REPEATED, None),
            ("symbol", 2, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
            ("symbol_roles", 3, _F.TYPE_INT32, _F.LABEL_OPTIONAL, None),
        ],
    ),
    (
        "SymbolInformation",
        [
            ("symbol", 1, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
            ("documentation", 3, _F.TYPE_STRING, _F.LABEL_REPEATED, None),
            ("display_name", 6, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
            ("enclosing_symbol", 8, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
        ],
    ),
]


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="apidrift/scip_subset.proto",
        package="scip",
        syntax="proto3",
    )
    for message_name, fields in _MESSAGES:
        message = file_proto.message_type.add(name=message_name)
        for name, number, field_type, label, type_name in fields:
            field = message.field.add(name=name, number=number, type=field_type, label=label)
            if type_name:
                field.type_name = type_name
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file_descriptor().SerializeToString())


def _message_class(name: str) -> type:
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"scip.{name}"))


Index = _message_class("Index")
Metadata = _message_class("Metadata")
ToolInfo = _message_class("ToolInfo")
Document = _message_class("Document")
Occurrence = _message_class("Occurrence")
SymbolInformation = _message_class("SymbolInformation")

# Occurrence.symbol_roles bits
ROLE_DEFINITION = 0x1
ROLE_IMPORT = 0x2
ROLE_WRITE_ACCESS = 0x4
ROLE_READ_ACCESS = 0x8
