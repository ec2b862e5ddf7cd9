"""Responses — envelopes and the (resource, action) status table."""

import pytest

from todolist.core.domain_types import Action, Resource
from todolist.core.responses import (
    ACTION_OUTCOMES, error_response, outcome_for, success_response,
)


@pytest.mark.parametrize("resource", list(Resource))
@pytest.mark.parametrize(
    "action, success, failure",
    [
        (Action.CREATE, 201, 400),
        (Action.GET_ALL, 200, 500),
        (Action.GET_ONE, 200, 404),
        (Action.UPDATE, 200, 400),
        (Action.DELETE, 200, 400),
    ],
)
def test_status_codes_depend_only_on_action(resource, action, success, failure):
    outcome = outcome_for(resource, action)
    assert (outcome.success_status, outcome.failure_status) == (success, failure)


def test_table_covers_every_resource_action_pair():
    assert len(ACTION_OUTCOMES) == len(Resource) * len(Action)


def test_messages_name_the_resource():
    assert outcome_for(Resource.TASK, Action.CREATE).success_message == "Task successfully created"
    assert outcome_for(Resource.CATEGORY, Action.GET_ALL).failure_message == "Failed to fetch categories"


def test_success_response_omits_missing_data():
    assert success_response("ok") == {"message": "ok"}
    assert success_response("ok", {"a": 1}) == {"message": "ok", "data": {"a": 1}}


def test_error_response_shape():
    assert error_response("failed", "boom") == {"message": "failed", "error": "boom"}
