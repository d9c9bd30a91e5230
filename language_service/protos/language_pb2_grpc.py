"""Client and server classes for the ``language.Language`` service."""
import grpc

from language_service.protos import language_pb2 as language__pb2

SERVICE_NAME = "language.Language"


class LanguageStub(object):
    """Translation and speech synthesis over a single request shape."""

    def __init__(self, channel):
        """Constructor.

        Args:
            channel: A grpc.Channel.
        """
        self.Translate = channel.unary_unary(
            f"/{SERVICE_NAME}/Translate",
            request_serializer=language__pb2.LanguageRequest.SerializeToString,
            response_deserializer=language__pb2.TranslateResponse.FromString,
        )
        self.Synthesize = channel.unary_unary(
            f"/{SERVICE_NAME}/Synthesize",
            request_serializer=language__pb2.LanguageRequest.SerializeToString,
            response_deserializer=language__pb2.SynthesizeResponse.FromString,
        )


class LanguageServicer(object):
    """Translation and speech synthesis over a single request shape."""

    def Translate(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def Synthesize(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")


def add_LanguageServicer_to_server(servicer, server):
    rpc_method_handlers = {
        "Translate": grpc.unary_unary_rpc_method_handler(
            servicer.Translate,
            request_deserializer=language__pb2.LanguageRequest.FromString,
            response_serializer=language__pb2.TranslateResponse.SerializeToString,
        ),
        "Synthesize": grpc.unary_unary_rpc_method_handler(
            servicer.Synthesize,
            request_deserializer=language__pb2.LanguageRequest.FromString,
            response_serializer=language__pb2.SynthesizeResponse.SerializeToString,
        ),
    }
    generic_handler = grpc.method_handlers_generic_handler(SERVICE_NAME, rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))
