# tests\shared\test_logging_config.py
import json

import structlog
from opentelemetry.sdk.trace import TracerProvider

from gaudi.shared.logging_config import add_trace_context, configure_logging
from gaudi.shared.observability import use_case_span


class TestLogging:
    def test_no_span_outside_a_trace(self):
        event = add_trace_context(None, None, {"event": "x"})

        assert event == {"event": "x"}

    def test_span_ids_inside_a_recording_span(self):
        tracer = TracerProvider().get_tracer(__name__)

        with tracer.start_as_current_span("use_case.RoomList") as span:
            event = add_trace_context(None, None, {"event": "x"})
            ctx = span.get_span_context()

        assert event["trace_id"] == format(ctx.trace_id, "032x")
        assert event["span_id"] == format(ctx.span_id, "016x")
        assert event["span"] == "use_case.RoomList"

    def test_json_output(self, capsys):
        configure_logging(log_format="json", log_level="INFO")
        try:
            structlog.get_logger().info("room_created", code="abc")
            line = capsys.readouterr().out.strip().splitlines()[-1]
            payload = json.loads(line)

            assert payload["event"] == "room_created"
            assert payload["code"] == "abc"
            assert payload["level"] == "info"
        finally:
            structlog.reset_defaults()

    def test_events_inside_a_use_case_carry_its_name(self, capsys):
        """
        Scenario: An adapter logs while a use case runs.
        Expected: The entry names the use case without the adapter passing it.
        """
        configure_logging(log_format="json", log_level="INFO")
        try:
            with use_case_span("RoomList"):
                structlog.get_logger().info("room_created", code="abc")
            structlog.get_logger().info("after")

            lines = capsys.readouterr().out.strip().splitlines()
            inside, after = json.loads(lines[-2]), json.loads(lines[-1])

            assert inside["use_case"] == "RoomList"
            assert "use_case" not in after
        finally:
            structlog.reset_defaults()
