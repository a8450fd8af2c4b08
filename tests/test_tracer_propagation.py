"""End-to-end propagation through the Tracer facade."""

import unittest

from tracebag import Format, InvalidFormatError, SpanContext, Tracer
from tracebag.utils import RandomUUIDGenerator


class CustomFormat:
    """A format token the tracer has never heard of."""


class TestTracerPropagation(unittest.TestCase):

    def setUp(self):
        self.tracer = Tracer("TestTracer")
        id_generator = RandomUUIDGenerator()
        self.trace_id = id_generator.generate()
        self.span_id = id_generator.generate()
        self.parent_id = id_generator.generate()

    def make_context(self):
        return SpanContext(self.trace_id, self.span_id, self.parent_id)

    def test_inject_invalid_format(self):
        context = self.make_context().add_baggage("TEST", "TEXT")
        carrier = {}
        with self.assertRaises(InvalidFormatError):
            self.tracer.inject(context, CustomFormat(), carrier)
        self.assertEqual(carrier, {})

    def test_inject(self):
        carrier = {}
        context = self.make_context().add_baggage("TEST", "TEXT")

        self.tracer.inject(context, Format.TEXT_MAP, carrier)

        self.assertEqual(len(carrier), 4)
        self.assertEqual(carrier["Trace-ID"], str(self.trace_id))
        self.assertEqual(carrier["Span-ID"], str(self.span_id))
        self.assertEqual(carrier["Parent-ID"], str(self.parent_id))
        self.assertEqual(carrier["Baggage-TEST"], "TEXT")

    def test_inject_url_encoded(self):
        carrier = {}
        context = (
            self.make_context()
            .add_baggage("TEST", "!@##*^ %^&&(*")
            .add_baggage("!@##*^ %^&&(*", "TEXT")
        )

        self.tracer.inject(context, Format.HTTP_HEADERS, carrier)

        self.assertEqual(len(carrier), 5)
        self.assertEqual(carrier["Trace-ID"], str(self.trace_id))
        self.assertEqual(carrier["Span-ID"], str(self.span_id))
        self.assertEqual(carrier["Parent-ID"], str(self.parent_id))
        self.assertEqual(carrier["Baggage-TEST"], "%21%40%23%23*%5E+%25%5E%26%26%28*")
        self.assertEqual(carrier["Baggage-%21%40%23%23*%5E+%25%5E%26%26%28*"], "TEXT")

    def test_extract(self):
        carrier = {
            "Baggage-TEST": "TEXT",
            "Trace-ID": str(self.trace_id),
            "Span-ID": str(self.span_id),
            "Parent-ID": str(self.parent_id),
        }

        context = self.tracer.extract(Format.TEXT_MAP, carrier)

        self.assertEqual(context.trace_id, str(self.trace_id))
        self.assertEqual(context.span_id, str(self.span_id))
        self.assertEqual(context.parent_id, str(self.parent_id))
        self.assertEqual(len(context.baggage), 1)
        self.assertEqual(context.get_baggage_item("TEST"), "TEXT")

    def test_extract_ignore_unknowns(self):
        carrier = {
            "Trace-ID": str(self.trace_id),
            "Span-ID": str(self.span_id),
            "Parent-ID": str(self.parent_id),
            "JunkKey": str(self.parent_id),
            "JunkKey2": str(self.parent_id),
        }

        context = self.tracer.extract(Format.HTTP_HEADERS, carrier)

        self.assertEqual(context.trace_id, str(self.trace_id))
        self.assertEqual(context.span_id, str(self.span_id))
        self.assertEqual(context.parent_id, str(self.parent_id))
        self.assertEqual(len(context.baggage), 0)

    def test_extract_invalid(self):
        carrier = {
            "Span-ID": str(self.span_id),
            "Parent-ID": str(self.parent_id),
        }

        self.assertIsNone(self.tracer.extract(Format.HTTP_HEADERS, carrier))

    def test_extract_url_encoded(self):
        carrier = {
            "Baggage-TEST": "!%40%23%23*%5E%20%25%5E%26%26(*",
            "Baggage-!%40%23%23*%5E%20%25%5E%26%26(*": "TEST",
            "Trace-ID": str(self.trace_id),
            "Span-ID": str(self.span_id),
            "Parent-ID": str(self.parent_id),
        }

        context = self.tracer.extract(Format.HTTP_HEADERS, carrier)

        self.assertEqual(context.trace_id, str(self.trace_id))
        self.assertEqual(context.span_id, str(self.span_id))
        self.assertEqual(context.parent_id, str(self.parent_id))
        self.assertEqual(len(context.baggage), 2)
        self.assertEqual(context.get_baggage_item("TEST"), "!@##*^ %^&&(*")
        self.assertEqual(context.get_baggage_item("!@##*^ %^&&(*"), "TEST")

    def test_extract_invalid_format(self):
        with self.assertRaises(InvalidFormatError):
            self.tracer.extract(CustomFormat(), "")

    def test_round_trip_between_tracers(self):
        client = Tracer("client")
        server = Tracer("server")
        context = self.make_context().with_baggage({"user": "jane doe", "tenant": "a&b"})

        for fmt in Format:
            headers = {}
            client.inject(context, fmt, headers)
            self.assertEqual(server.extract(fmt, headers), context)


if __name__ == "__main__":
    unittest.main()
