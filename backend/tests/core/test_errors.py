"""Error Hierarchy — codes, statuses and the REST envelope."""

from todolist.core.errors import (
    DatabaseError, ErrorCategory, ReferentialIntegrityError, ResourceNotFoundError,
    TodoListError,
)


def test_not_found_message_and_context():
    err = ResourceNotFoundError("Task", "abc")
    assert isinstance(err, TodoListError)
    assert err.message == "Task with ID abc not found"
    assert err.http_status == 404
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.context.resource == "Task"
    assert err.context.entity_id == "abc"


def test_referential_error_is_client_error():
    err = ReferentialIntegrityError("Category with ID x does not exist")
    assert err.code == "REFERENTIAL_INTEGRITY"
    assert err.http_status == 400


def test_database_error_is_critical():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.message.startswith("Database execute failed")


def test_to_response_envelope():
    body = ResourceNotFoundError("Category", "1").to_response()
    assert body["message"] == "Category with ID 1 not found"
    assert body["error"]["code"] == "RESOURCE_NOT_FOUND"
    assert body["error"]["context"]["entity_id"] == "1"
