"""Tests for the task entry point and its inputs document."""

import logging

import pytest

from rating_refresh.exceptions import ConfigurationError
from rating_refresh.task.inputs import TaskInputs
from rating_refresh.task.runner import run_task
from tests.utils import TEST_CHAIN_ID, TEST_HOOK, TEST_ORACLE, report_document


@pytest.fixture
def task_inputs(tokens, reports) -> TaskInputs:
    return TaskInputs.from_tokens(
        chain_id=TEST_CHAIN_ID,
        ssa_oracle_address=TEST_ORACLE,
        sarm_hook_address=TEST_HOOK,
        tokens=tokens,
        reports=reports,
        datalink_api_url="https://datalink.example.com",
    )


def test_document_uses_manifest_keys(task_inputs, tokens):
    document = task_inputs.to_document()

    assert document["chainId"] == TEST_CHAIN_ID
    assert document["ssaOracleAddress"] == TEST_ORACLE
    assert document["sarmHookAddress"] == TEST_HOOK
    assert document["eurcAddress"] == tokens[0].address
    assert document["feedIdUsdc"] == tokens[9].feed_id
    assert document["usdeAddress"] == tokens[5].address
    assert document["reports"][0]["fullReport"] == task_inputs.reports[0].full_report
    assert "datalinkUser" not in document
    assert "datalinkSecret" not in document


def test_document_round_trips_tokens(task_inputs, tokens):
    parsed = TaskInputs.parse(task_inputs.to_document())

    assert parsed.tokens() == tokens
    assert parsed.reports == task_inputs.reports


def test_missing_token_descriptor_is_rejected(tokens):
    with pytest.raises(ConfigurationError, match="USDC"):
        TaskInputs.from_tokens(chain_id=1, ssa_oracle_address=TEST_ORACLE, tokens=tokens[:9])


def test_invalid_document_is_rejected(task_inputs):
    document = task_inputs.to_document()
    del document["ssaOracleAddress"]

    with pytest.raises(ConfigurationError, match="Invalid task inputs"):
        TaskInputs.parse(document)


def test_run_submits_one_intent_per_token(task_inputs):
    submitted = []

    intents = run_task(task_inputs, submit=submitted.append)

    assert len(intents) == 10
    assert submitted == intents


def test_run_accepts_raw_document(task_inputs):
    submitted = []
    document = task_inputs.to_document()
    document["reports"] = document["reports"][:3]

    run_task(document, submit=submitted.append)

    assert len(submitted) == 3


def test_run_without_reports_skips_execution(task_inputs, caplog):
    submitted = []
    empty = task_inputs.model_copy(update={"reports": []})

    with caplog.at_level(logging.WARNING, logger="rating_refresh.task"):
        assert run_task(empty, submit=submitted.append) == []

    assert submitted == []
    assert "No reports in inputs" in caplog.text


def test_run_with_unmatched_reports_submits_nothing(task_inputs):
    submitted = []
    document = task_inputs.to_document()
    document["reports"] = [report_document("0xunrelated")]

    assert run_task(document, submit=submitted.append) == []
    assert submitted == []
