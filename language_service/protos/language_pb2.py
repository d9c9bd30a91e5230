# -*- coding: utf-8 -*-
"""Protocol buffer bindings for ``language.proto``.

The file descriptor is assembled with ``descriptor_pb2`` so the layout below
can be read side by side with ``language.proto``. The test suite compiles that
file with ``grpc_tools.protoc`` and checks that the two agree. Message and enum
classes are then produced by the same builder protoc-generated modules use.
"""
from google.protobuf import descriptor_pb2 as _descriptor_pb2
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
from google.protobuf.internal import builder as _builder

_sym_db = _symbol_database.Default()

_FieldProto = _descriptor_pb2.FieldDescriptorProto

_PROTO_PATH = "language_service/protos/language.proto"
_PACKAGE = "language"


def _scalar(name, number, field_type):
    return _FieldProto(
        name=name,
        number=number,
        type=field_type,
        label=_FieldProto.LABEL_OPTIONAL,
        json_name=_json_name(name),
    )


def _enum_field(name, number, enum_name):
    return _FieldProto(
        name=name,
        number=number,
        type=_FieldProto.TYPE_ENUM,
        type_name=f".{_PACKAGE}.{enum_name}",
        label=_FieldProto.LABEL_OPTIONAL,
        json_name=_json_name(name),
    )


def _json_name(name):
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _build_file_descriptor_proto():
    file_proto = _descriptor_pb2.FileDescriptorProto(
        name=_PROTO_PATH,
        package=_PACKAGE,
        syntax="proto3",
    )

    request = file_proto.message_type.add(name="LanguageRequest")
    request.field.extend(
        [
            _scalar("text", 1, _FieldProto.TYPE_STRING),
            _enum_field("source_language_code", 2, "LanguageCode"),
            _enum_field("target_language_code", 3, "LanguageCode"),
        ]
    )

    translate_response = file_proto.message_type.add(name="TranslateResponse")
    translate_response.field.extend(
        [
            _scalar("translated_text", 1, _FieldProto.TYPE_STRING),
            _enum_field("error_type", 3, "ErrorType"),
        ]
    )
    translate_response.reserved_range.add(start=2, end=3)

    synthesize_response = file_proto.message_type.add(name="SynthesizeResponse")
    synthesize_response.field.extend(
        [
            _scalar("audio_bytes", 1, _FieldProto.TYPE_BYTES),
            _enum_field("error_type", 3, "ErrorType"),
        ]
    )
    synthesize_response.reserved_range.add(start=2, end=3)

    error_type = file_proto.enum_type.add(name="ErrorType")
    for number, name in enumerate(("None", "User", "Internal")):
        error_type.value.add(name=name, number=number)

    language_code = file_proto.enum_type.add(name="LanguageCode")
    for number, name in enumerate(("UNKNOWN", "EN", "ZH", "FR", "DE", "PT", "ES")):
        language_code.value.add(name=name, number=number)

    service = file_proto.service.add(name="Language")
    service.method.add(
        name="Translate",
        input_type=f".{_PACKAGE}.LanguageRequest",
        output_type=f".{_PACKAGE}.TranslateResponse",
    )
    service.method.add(
        name="Synthesize",
        input_type=f".{_PACKAGE}.LanguageRequest",
        output_type=f".{_PACKAGE}.SynthesizeResponse",
    )

    return file_proto


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(
    _build_file_descriptor_proto().SerializeToString()
)

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, "language_service.protos.language_pb2", _globals)
