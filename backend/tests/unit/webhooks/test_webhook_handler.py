"""
Unit tests for the webhook handler and its entry points.
"""
import json
import logging
import time
from unittest.mock import MagicMock

import pytest

from apps.webhooks.handler import handle, serialize_context
from apps.webhooks.lambda_function import lambda_handler
from apps.webhooks.tasks import process_webhook_event
from checkout_service.log_formatters import json_formatter

WEBHOOK_LOGGER = 'checkout_service.webhooks'


@pytest.fixture
def sample_event():
    return {
        'id': 'evt_1NqXYZ2eZvKYlo2C',
        'type': 'payment_intent.succeeded',
        'data': {
            'object': {
                'id': 'pi_test_000001',
                'amount': 554,
                'currency': 'gbp',
                'status': 'succeeded',
                'metadata': {'payment_id': '0b6c2f1e-5f0a-4d7e-9f38-2d1f9a1c0e11'},
            }
        },
    }


@pytest.fixture
def lambda_context():
    context = MagicMock(spec=[
        'aws_request_id', 'function_name', 'invoked_function_arn',
        'memory_limit_in_mb', 'log_stream_name', 'get_remaining_time_in_millis'
    ])
    context.aws_request_id = 'c6af9ac6-7b61-11e6-9a41-93e812345678'
    context.function_name = 'checkout-webhook'
    context.invoked_function_arn = 'arn:aws:lambda:eu-west-2:123456789012:function:checkout-webhook'
    context.memory_limit_in_mb = '128'
    context.log_stream_name = '2024/01/15/[$LATEST]abcdef'
    context.get_remaining_time_in_millis.return_value = 30000
    return context


def webhook_records(caplog):
    return [r for r in caplog.records if r.name == WEBHOOK_LOGGER]


class TestHandle:
    """Test the logging-only webhook handler."""

    def test_logs_exactly_one_record(self, caplog, sample_event, lambda_context):
        caplog.set_level(logging.DEBUG, logger=WEBHOOK_LOGGER)

        result = handle(sample_event, lambda_context)

        records = webhook_records(caplog)
        assert result is None
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert records[0].getMessage() == 'Received webhook from queue'
        assert records[0]._webhook == sample_event
        assert records[0]._lambda['awsRequestId'] == lambda_context.aws_request_id

    def test_event_is_logged_verbatim(self, caplog):
        caplog.set_level(logging.DEBUG, logger=WEBHOOK_LOGGER)
        odd_event = {'Records': [{'body': '{"not": "parsed"}'}], 'n': [1, None, True]}

        handle(odd_event, None)

        assert webhook_records(caplog)[0]._webhook is odd_event

    def test_nothing_logged_above_debug(self, caplog, sample_event):
        caplog.set_level(logging.INFO, logger=WEBHOOK_LOGGER)

        handle(sample_event, None)

        assert webhook_records(caplog) == []

    def test_renders_as_single_json_line(self, caplog, sample_event, lambda_context):
        caplog.set_level(logging.DEBUG, logger=WEBHOOK_LOGGER)
        handle(sample_event, lambda_context)
        record = webhook_records(caplog)[0]

        line = json_formatter().format(record)

        assert '\n' not in line
        payload = json.loads(line)
        assert payload['event'] == 'Received webhook from queue'
        assert payload['level'] == 'debug'
        assert payload['logger'] == WEBHOOK_LOGGER
        assert payload['_webhook'] == sample_event
        assert payload['_lambda']['functionName'] == 'checkout-webhook'


class TestSerializeContext:
    """Test conversion of invocation contexts."""

    def test_none(self):
        assert serialize_context(None) == {}

    def test_mapping_is_copied(self):
        context = {'awsRequestId': 'abc'}

        serialized = serialize_context(context)

        assert serialized == context
        assert serialized is not context

    def test_lambda_context(self, lambda_context):
        before = int(time.time() * 1000)

        serialized = serialize_context(lambda_context)

        assert serialized['awsRequestId'] == 'c6af9ac6-7b61-11e6-9a41-93e812345678'
        assert serialized['functionName'] == 'checkout-webhook'
        assert serialized['invokedFunctionArn'].endswith(':function:checkout-webhook')
        assert serialized['memoryLimitInMB'] == '128'
        assert serialized['logStreamName'] == '2024/01/15/[$LATEST]abcdef'
        assert before + 30000 <= serialized['deadlineMs'] <= int(time.time() * 1000) + 30000

    def test_lambda_trace_id_read_from_environment(self, lambda_context, monkeypatch):
        trace_id = 'Root=1-5759e988-bd862e3fe1be46a994272793;Parent=53995c3f42cd8ad8;Sampled=1'
        monkeypatch.setenv('_X_AMZN_TRACE_ID', trace_id)

        serialized = serialize_context(lambda_context)

        assert serialized['traceId'] == trace_id
        assert 'requestId' not in serialized

    def test_lambda_trace_id_absent(self, lambda_context, monkeypatch):
        monkeypatch.delenv('_X_AMZN_TRACE_ID', raising=False)

        assert serialize_context(lambda_context)['traceId'] is None

    def test_task_request(self):
        request = MagicMock(spec=['id', 'task', 'retries', 'hostname', 'delivery_info'])
        request.id = 'task-id-1'
        request.task = 'process_webhook_event'
        request.retries = 0
        request.hostname = 'celery@worker-1'
        request.delivery_info = None

        assert serialize_context(request) == {
            'id': 'task-id-1',
            'task': 'process_webhook_event',
            'retries': 0,
            'hostname': 'celery@worker-1',
        }


class TestEntryPoints:
    """Test the Lambda and Celery entry points."""

    def test_lambda_handler(self, caplog, sample_event, lambda_context):
        caplog.set_level(logging.DEBUG, logger=WEBHOOK_LOGGER)

        assert lambda_handler(sample_event, lambda_context) is None

        records = webhook_records(caplog)
        assert len(records) == 1
        assert records[0]._webhook == sample_event

    def test_celery_task(self, caplog, sample_event):
        caplog.set_level(logging.DEBUG, logger=WEBHOOK_LOGGER)

        result = process_webhook_event.apply(args=[sample_event])

        assert result.successful()
        records = webhook_records(caplog)
        assert len(records) == 1
        assert records[0]._webhook == sample_event
        assert records[0]._lambda['task'] == 'process_webhook_event'

    def test_failure_propagates(self, sample_event, lambda_context):
        lambda_context.get_remaining_time_in_millis.side_effect = RuntimeError('boom')

        with pytest.raises(RuntimeError):
            lambda_handler(sample_event, lambda_context)
